from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ClientConnection:
    """A configured destination the client may connect to."""

    destination: str
    for_discovery: bool = True


class ClientConnectionBuilder:
    def __init__(self) -> None:
        self._destination: str | None = None
        self._for_discovery = True

    def set_destination(self, destination: str):
        self._destination = destination
        return self

    def set_for_discovery(self, for_discovery: bool):
        self._for_discovery = for_discovery
        return self

    def build(self) -> ClientConnection:
        if self._destination is None:
            raise ValueError("A client connection requires a destination")

        return ClientConnection(
            destination=self._destination,
            for_discovery=self._for_discovery,
        )
