from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from remote_client.errors import SelectorInstantiationError

T = TypeVar("T")


@dataclass(slots=True)
class SelectorFactory(Generic[T]):
    """
    Deferred construction of a configured selector.

    Nothing is resolved or constructed until ``create()`` is called.
    Every failure along the way surfaces as SelectorInstantiationError
    naming ``class_name``.
    """

    class_name: str
    constructor: Callable[[str], T]

    def create(self) -> T:
        try:
            return self.constructor(self.class_name)

        except SelectorInstantiationError:
            raise

        except Exception as err:
            raise SelectorInstantiationError(self.class_name, err) from err
