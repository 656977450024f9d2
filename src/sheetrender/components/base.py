"""
Base class for sheet components.

A component pairs a shared SheetContext with its own frozen props dataclass.
Rendering a component only queues work on the context; children are built and
rendered synchronously through render_child(). Components are single-use:
constructed, rendered once, then discarded.
"""

from typing import Any, Generic, Type, TypeVar

from sheetrender.context import SheetContext

P = TypeVar("P")
C = TypeVar("C", bound="Component[Any]")


class Component(Generic[P]):
    """A unit of render logic.

    Subclasses implement render() and read their inputs from self.props.

    Attributes:
        context: Shared SheetContext (not owned by the component)
        props: The component's props
    """

    def __init__(self, context: SheetContext, props: P) -> None:
        self.context = context
        self.props = props

    def render(self) -> None:
        raise NotImplementedError(f"{type(self).__name__} must implement render()")

    def render_child(self, component_cls: Type[C], props: Any) -> C:
        """Instantiate a child with this component's context and render it.

        Args:
            component_cls: Component class to instantiate
            props: Props for the child

        Returns:
            The rendered child instance
        """
        child = component_cls(self.context, props)
        child.render()
        return child
