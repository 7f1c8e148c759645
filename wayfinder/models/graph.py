"""Building graph schema: destination nodes, route steps and the graph root."""

from typing import Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

DESTINATION_TYPE = "destination"


class DestinationNode(BaseModel):
    """A point of interest in the building graph."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique node identifier, e.g. F2_STUDY_A")
    name: str = Field(..., description="Display name")
    type: str = Field(default=DESTINATION_TYPE, description="'destination' or any other node type")
    floor: int = Field(..., description="Floor number the node is on")
    search_keywords: Optional[Tuple[str, ...]] = Field(
        None, description="Extra terms the node can be found by"
    )

    @property
    def is_destination(self) -> bool:
        return self.type == DESTINATION_TYPE


class RouteStep(BaseModel):
    """One instruction of a precomputed route."""

    model_config = ConfigDict(frozen=True)

    instruction: str = Field(..., description="Human readable instruction")
    floor: int = Field(default=1, description="Floor the step is walked on")
    type: Literal["normal", "floor_change"] = Field(default="normal")
    path_id: Optional[str] = Field(None, description="Floor-plan path element to highlight")
    landmark_photo: Optional[str] = Field(None, description="Landmark photo reference")
    next_floor: Optional[int] = Field(None, description="Target floor of a floor change")


class LibraryGraph(BaseModel):
    """Root of the building data: nodes plus precomputed paths keyed 'start-end'."""

    model_config = ConfigDict(frozen=True)

    nodes: List[DestinationNode] = Field(default_factory=list)
    paths: Dict[str, List[RouteStep]] = Field(default_factory=dict)

    @field_validator("nodes")
    @classmethod
    def validate_unique_ids(cls, v: List[DestinationNode]) -> List[DestinationNode]:
        """Reject graphs with duplicate node ids."""
        seen = set()
        for node in v:
            if node.id in seen:
                raise ValueError(f"Duplicate node id: {node.id}")
            seen.add(node.id)
        return v
