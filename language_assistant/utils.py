import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Settlement(Generic[T]):
    """Outcome of one branch of a fan-out: either a value or the exception it raised."""

    value: T | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def settle_all(*aws: Awaitable[Any]) -> list[Settlement[Any]]:
    """
    Run all awaitables concurrently and wait until every one has settled.

    A failing branch never cancels its siblings; results keep argument order.
    """
    results = await asyncio.gather(*aws, return_exceptions=True)
    return [
        Settlement(error=result) if isinstance(result, BaseException) else Settlement(value=result)
        for result in results
    ]


def normalize_input(text: str | None) -> str:
    """Trim surrounding whitespace; ``None`` counts as empty."""
    return (text or "").strip()
