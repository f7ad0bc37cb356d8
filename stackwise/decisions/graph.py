"""Pydantic models for the engine's inputs.

The architecture graph and project descriptor are produced upstream (by the
diagram generator and the onboarding flow) and arrive as plain dicts decoded
from JSON. Only ``nodes[].type`` and the node/edge counts drive decisions;
every other field is accepted and passed through untouched.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from stackwise.config import DEFAULT_PROJECT_NAME
from stackwise.errors import InputError


class ArchitectureNode(BaseModel):
    """One infrastructure component in the graph."""

    model_config = ConfigDict(extra="allow")

    id: Any = None
    type: str  # Component category id, e.g. "database"; unknown types are allowed


class ArchitectureEdge(BaseModel):
    """Directed relationship between two nodes."""

    model_config = ConfigDict(extra="allow")

    source: Any = None
    target: Any = None


class ArchitectureGraph(BaseModel):
    """Node/edge structure describing the chosen infrastructure."""

    model_config = ConfigDict(extra="allow")

    nodes: list[ArchitectureNode]
    edges: list[ArchitectureEdge] = Field(default_factory=list)

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def node_types(self) -> list[str]:
        """Distinct node types in first-seen order."""
        seen: list[str] = []
        for node in self.nodes:
            if node.type not in seen:
                seen.append(node.type)
        return seen


class ProjectDescriptor(BaseModel):
    """Free-text description of the project plus its name."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    description: str
    project_name: str = Field(default=DEFAULT_PROJECT_NAME, alias="projectName")


def _format_validation_error(label: str, error: ValidationError) -> list[str]:
    """Flatten pydantic errors into "graph.nodes.0.type: Field required" messages."""
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in (label, *item["loc"]))
        messages.append(f"{location}: {item['msg']}")
    return messages


def parse_graph(graph: ArchitectureGraph | dict[str, Any]) -> ArchitectureGraph:
    """Validate an architecture graph.

    Args:
        graph: Graph model or dict with ``nodes`` (required) and ``edges``

    Returns:
        Validated ArchitectureGraph

    Raises:
        InputError: If nodes are missing or a node/edge lacks a required field
    """
    if isinstance(graph, ArchitectureGraph):
        return graph
    if not isinstance(graph, dict):
        raise InputError(
            f"Architecture graph must be a mapping, got {type(graph).__name__}",
            errors=["graph: expected an object with a 'nodes' array"],
        )

    try:
        return ArchitectureGraph.model_validate(graph)
    except ValidationError as e:
        errors = _format_validation_error("graph", e)
        raise InputError(f"Invalid architecture graph: {'; '.join(errors)}", errors) from e


def parse_descriptor(descriptor: ProjectDescriptor | dict[str, Any]) -> ProjectDescriptor:
    """Validate a project descriptor.

    Raises:
        InputError: If the description is missing or not a string
    """
    if isinstance(descriptor, ProjectDescriptor):
        return descriptor
    if not isinstance(descriptor, dict):
        raise InputError(
            f"Project descriptor must be a mapping, got {type(descriptor).__name__}",
            errors=["descriptor: expected an object with a 'description' field"],
        )

    # An explicit null name behaves like an absent one
    data = {
        key: value
        for key, value in descriptor.items()
        if value or key not in ("projectName", "project_name")
    }

    try:
        return ProjectDescriptor.model_validate(data)
    except ValidationError as e:
        errors = _format_validation_error("descriptor", e)
        raise InputError(f"Invalid project descriptor: {'; '.join(errors)}", errors) from e
