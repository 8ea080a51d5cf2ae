import importlib
from typing import Any, Callable, Dict, Generic, TypeVar

from .cluster_node_selector import (
    ClusterNodeSelector,
    FirstAvailableClusterNodeSelector,
    RandomClusterNodeSelector,
)
from .deployment_node_selector import (
    DeploymentNodeSelector,
    FirstAvailableDeploymentNodeSelector,
    RandomDeploymentNodeSelector,
)
from .selector_factory import SelectorFactory

T = TypeVar("T")


class SelectorRegistry(Generic[T]):
    """
    Maps selector identifiers to the callables that construct them.

    Identifiers are either short names registered up front, or dotted
    import paths (``package.module.Selector`` or ``package.module:Selector``)
    which are imported on demand. Constructed selectors are checked
    against ``protocol`` before being handed out.

    Usage:
        registry = SelectorRegistry(ClusterNodeSelector)
        registry.register("sticky", StickyClusterNodeSelector)

        factory = registry.factory("sticky")
        selector = factory.create()
    """

    def __init__(
        self,
        protocol: type[T],
        selectors: Dict[str, Callable[[], T]] | None = None,
    ) -> None:
        self._protocol = protocol
        self._selectors: Dict[str, Callable[[], T]] = dict(selectors or {})

    def __contains__(self, class_name: str) -> bool:
        return class_name in self._selectors

    def register(self, name: str, selector_type: Callable[[], T]) -> None:
        if not callable(selector_type):
            raise TypeError(f"Selector {name!r} must be callable, got {selector_type!r}")

        self._selectors[name] = selector_type

    def unregister(self, name: str) -> bool:
        return self._selectors.pop(name, None) is not None

    def resolve(self, class_name: str) -> Callable[[], T]:
        """
        Find the constructor for ``class_name``.

        Raises:
            LookupError: Identifier is neither registered nor an import path
            ImportError: Module in the import path cannot be imported
            AttributeError: Module has no such attribute
            TypeError: Attribute is not callable
        """
        if (selector_type := self._selectors.get(class_name)) is not None:
            return selector_type

        module_name, separator, attribute = class_name.partition(":")
        if not separator:
            module_name, _, attribute = class_name.rpartition(".")

        if not module_name or not attribute:
            raise LookupError(f"Unknown selector {class_name!r}")

        module = importlib.import_module(module_name)
        selector_type = getattr(module, attribute)

        if not callable(selector_type):
            raise TypeError(f"{class_name!r} is not callable")

        return selector_type

    def instantiate(self, class_name: str) -> T:
        selector_type = self.resolve(class_name)
        selector: Any = selector_type()

        if not isinstance(selector, self._protocol):
            raise TypeError(
                f"{class_name!r} does not implement {self._protocol.__name__}"
            )

        return selector

    def factory(self, class_name: str) -> SelectorFactory[T]:
        return SelectorFactory(
            class_name=class_name,
            constructor=self.instantiate,
        )


def create_deployment_node_selector_registry() -> SelectorRegistry[DeploymentNodeSelector]:
    return SelectorRegistry(
        DeploymentNodeSelector,
        selectors={
            "first_available": FirstAvailableDeploymentNodeSelector,
            "random": RandomDeploymentNodeSelector,
        },
    )


def create_cluster_node_selector_registry() -> SelectorRegistry[ClusterNodeSelector]:
    return SelectorRegistry(
        ClusterNodeSelector,
        selectors={
            "first_available": FirstAvailableClusterNodeSelector,
            "random": RandomClusterNodeSelector,
        },
    )

