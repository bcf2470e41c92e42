from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Literal, Optional, Union

from uiforge.exceptions import InvalidStyleGroup

# Serialization order of the style buckets and breakpoint overlays.
STYLE_BUCKETS = ("layout", "spacing", "typography", "colors", "borders", "effects")
BREAKPOINTS = ("sm", "md", "lg")

Position = Literal["before", "after", "inside"]
Flavor = Literal["loose", "typed"]


class ResponsiveStyles(BaseModel):
    """
    Per-breakpoint utility class overlays.
    """
    model_config = ConfigDict(frozen=True)

    sm: List[str] = Field(default_factory=list)
    md: List[str] = Field(default_factory=list)
    lg: List[str] = Field(default_factory=list)


class StyleGroups(BaseModel):
    """
    Fixed set of ordered utility class buckets plus breakpoint overlays.
    """
    model_config = ConfigDict(frozen=True)

    layout: List[str] = Field(default_factory=list)
    spacing: List[str] = Field(default_factory=list)
    typography: List[str] = Field(default_factory=list)
    colors: List[str] = Field(default_factory=list)
    borders: List[str] = Field(default_factory=list)
    effects: List[str] = Field(default_factory=list)
    responsive: ResponsiveStyles = Field(default_factory=ResponsiveStyles)

    def tokens(self, group: str) -> List[str]:
        """Return the token sequence of a bucket or breakpoint overlay."""
        if group in STYLE_BUCKETS:
            return list(getattr(self, group))
        if group in BREAKPOINTS:
            return list(getattr(self.responsive, group))
        raise InvalidStyleGroup(group)

    def with_tokens(self, group: str, tokens: List[str]) -> "StyleGroups":
        """Return a copy with one bucket (or breakpoint overlay) replaced wholesale."""
        if group in STYLE_BUCKETS:
            return self.model_copy(update={group: list(tokens)})
        if group in BREAKPOINTS:
            responsive = self.responsive.model_copy(update={group: list(tokens)})
            return self.model_copy(update={"responsive": responsive})
        raise InvalidStyleGroup(group)

    def is_empty(self) -> bool:
        return not any(self.tokens(g) for g in STYLE_BUCKETS + BREAKPOINTS)


class Node(BaseModel):
    """
    One element of the document tree.

    The nesting of `children` is authoritative; `parent_id` is a cache kept in
    sync by the mutation operations.
    """
    model_config = ConfigDict(frozen=True)

    id: str = ""
    variant: str
    display_name: str = ""
    attributes: Dict[str, Any] = Field(default_factory=dict)
    styles: StyleGroups = Field(default_factory=StyleGroups)
    children: List["Node"] = Field(default_factory=list)
    parent_id: Optional[str] = None


Node.model_rebuild()

Forest = List[Node]


class Snapshot(BaseModel):
    """
    Immutable deep copy of the whole forest at one instant.
    """
    model_config = ConfigDict(frozen=True)

    elements: List[Node] = Field(default_factory=list)
    timestamp: float


class HistoryLog(BaseModel):
    """
    Serializable form of the undo/redo log.
    """
    entries: List[Snapshot] = Field(default_factory=list)
    index: int = -1
    capacity: int = 50


class MutationResult(BaseModel):
    """
    Outcome of one engine call.
    """
    operation: str
    changed: bool
    node_id: Optional[str] = None
    message: str = ""


# Drag and drop descriptors

class ActiveDescriptor(BaseModel):
    """
    The item being dragged: a catalog entry (is_new) or an existing tree node.
    """
    id: str
    is_new: bool = False
    variant: str = ""
    node: Optional[Node] = None  # Materialised node for new items


class HoverDescriptor(BaseModel):
    """
    The droppable under the pointer. A target id of ROOT_SENTINEL means the canvas itself.
    """
    target_id: Optional[str] = None


class InsertIntent(BaseModel):
    kind: Literal["insert"] = "insert"
    parent_id: Optional[str] = None  # None: root level
    index: Optional[int] = None      # None: append


class MoveIntent(BaseModel):
    kind: Literal["move"] = "move"
    over_id: Optional[str] = None    # None: append at root end
    position: Position = "after"


PlacementIntent = Union[InsertIntent, MoveIntent]


class DropIndicator(BaseModel):
    """
    What the canvas highlights while dragging.
    """
    target_id: str
    position: Position


# Catalog

class ComponentDefinition(BaseModel):
    """
    Catalog entry for one variant.
    """
    variant: str
    name: str
    category: str
    icon: str = ""
    default_attributes: Dict[str, Any] = Field(default_factory=dict)
    default_styles: StyleGroups = Field(default_factory=StyleGroups)
    is_container: bool = False
    accepts_children: bool = False


# Code generation / export

class GeneratedCode(BaseModel):
    """
    Both output flavors of one serializer walk.
    """
    loose: str
    typed: str

    def for_flavor(self, flavor: Flavor) -> str:
        return self.typed if flavor == "typed" else self.loose


class ExportOptions(BaseModel):
    format: Literal["jsx", "tsx", "project"] = "tsx"
    include_imports: bool = True
    component_name: str = "GeneratedComponent"
