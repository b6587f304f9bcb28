"""
Lifespan registry for the FastAPI app.
Startup/shutdown hooks register themselves with ``@manager.add`` and run in
registration order; shutdown unwinds in reverse.
"""

import inspect
from contextlib import AsyncExitStack, asynccontextmanager
from typing import Any, AsyncIterator, Callable

from fastapi import FastAPI
from loguru import logger


def _wants_app(hook: Callable) -> bool:
    """Whether a hook declares a parameter for the app."""
    return bool(inspect.signature(hook).parameters)


class LifespanManager:
    """Runs every registered lifespan hook and merges the state they yield.

    Two hooks yielding the same state key is a wiring error, reported at
    startup instead of letting the later hook silently win.
    """

    def __init__(self):
        self._hooks: list[Callable] = []

    @property
    def registered(self) -> list[str]:
        return [hook.__name__ for hook in self._hooks]

    def add(self, hook: Callable) -> Callable:
        """
        Register a lifespan hook. The hook may take the app or nothing.

        Usage:
            @manager.add
            @asynccontextmanager
            async def scoring_rules():
                yield {"rules": ...}
        """
        self._hooks.append(hook)
        return hook

    @asynccontextmanager
    async def __call__(self, app: FastAPI) -> AsyncIterator[dict[str, Any]]:
        state: dict[str, Any] = {}
        async with AsyncExitStack() as stack:
            for hook in self._hooks:
                context = hook(app) if _wants_app(hook) else hook()
                hook_state = await stack.enter_async_context(context) or {}

                clashes = state.keys() & hook_state.keys()
                if clashes:
                    raise RuntimeError(
                        f"Lifespan {hook.__name__} redefines state: {', '.join(sorted(clashes))}"
                    )
                state.update(hook_state)
                logger.debug("Lifespan entered", hook=hook.__name__, keys=sorted(hook_state))

            yield state


manager = LifespanManager()
