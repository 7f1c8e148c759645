"""Kiosk session state passed explicitly between presentation calls."""

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from ..models.graph import DestinationNode, LibraryGraph, RouteStep
from .graph import find_node, lookup_route


class DestinationNotFoundError(KeyError):
    """Raised when a destination id is not part of the graph."""


@dataclass(frozen=True)
class SessionState:
    """What the kiosk is showing: floor, selected destination and its route."""

    current_floor: int = 1
    selected_destination: Optional[DestinationNode] = None
    current_route: Optional[Tuple[RouteStep, ...]] = None

    @property
    def has_route(self) -> bool:
        return self.current_route is not None


def select_destination(
    state: SessionState,
    graph: Optional[LibraryGraph],
    node_id: str,
    start_id: str
) -> SessionState:
    """
    Select a destination and attach its route from ``start_id``.

    A destination without a stored route stays selected with no route.

    Raises:
        DestinationNotFoundError: ``node_id`` is not in the graph
    """
    destination = find_node(graph, node_id)
    if destination is None:
        raise DestinationNotFoundError(node_id)

    route = lookup_route(graph, start_id, node_id)
    return replace(
        state,
        selected_destination=destination,
        current_route=tuple(route) if route is not None else None,
    )


def switch_floor(state: SessionState, floor: int) -> SessionState:
    """Show another floor; the selection and route are kept."""
    if state.current_floor == floor:
        return state
    return replace(state, current_floor=floor)


def reset(default_floor: int = 1) -> SessionState:
    """Back to the selection view: clear the destination and return to the default floor."""
    return SessionState(current_floor=default_floor)
