# ============================================================================
# CHECK REGISTRY
# ============================================================================
# STATUS: Core - Check registration
# PURPOSE: Add-or-replace mapping from check name to Check
# CREATED: 19 OCT 2026
# ============================================================================
"""
Check Registry

Holds the checks a ping request runs. Populated once while the
middleware is configured, then frozen and only read.

Usage:
    registry = CheckRegistry()

    # Decorator registration
    @registry.check("db", timeout=2.0)
    def db():
        return connection.execute("SELECT 1").scalar() == 1

    # Manual registration
    registry.register("queue", lambda: queue.ping())

    # Unnamed check (affects overall status only)
    registry.register(None, lambda: cache.is_alive())

    registry.freeze()
"""

from typing import Any, Callable, Dict, Iterator, List, Optional

from pydantic import ValidationError

from core.logging import ComponentType, get_logger
from pingcheck.core import DEFAULT_TIMEOUT, Check
from pingcheck.exceptions import CheckConfigurationError, RegistryFrozenError

logger = get_logger(__name__, ComponentType.REGISTRY)


class CheckRegistry:
    """
    Registry for health checks.

    Keys are check names; None is the single unnamed slot. Registering an
    existing name swaps in the new Check at the old position, so
    iteration order stays the order names were first registered.
    """

    def __init__(self, default_timeout: float = DEFAULT_TIMEOUT):
        self._checks: Dict[Optional[str], Check] = {}
        self._frozen = False
        self.default_timeout = default_timeout

    def register(
        self,
        name: Optional[str],
        work: Callable[[], Any],
        timeout: Optional[float] = None,
        group: Optional[str] = None,
    ) -> Check:
        """
        Register a check, replacing any check with the same name.

        Args:
            name: Check name, or None for the unnamed check
            work: Zero-argument callable (sync or async)
            timeout: Seconds before the check counts as timed out
            group: Optional label for grouping related checks

        Returns:
            The registered Check

        Raises:
            CheckConfigurationError: Invalid name, timeout or work
            RegistryFrozenError: Registry already frozen
        """
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register check {name!r}: registry is frozen"
            )

        try:
            check = Check(
                name=name,
                timeout=self.default_timeout if timeout is None else timeout,
                work=work,
                group=group,
            )
        except ValidationError as e:
            raise CheckConfigurationError(f"Invalid check {name!r}: {e}") from e

        if name in self._checks:
            logger.warning(f"Overwriting health check: {name!r}")

        self._checks[name] = check
        logger.debug(f"Registered health check: {name!r} (timeout={check.timeout}s)")
        return check

    def check(
        self,
        name: Optional[str] = None,
        timeout: Optional[float] = None,
        group: Optional[str] = None,
    ) -> Callable[[Callable[[], Any]], Callable[[], Any]]:
        """
        Decorator form of register().

        Example:
            @registry.check("redis", timeout=0.5)
            async def redis():
                return await client.ping()
        """
        def decorator(work: Callable[[], Any]) -> Callable[[], Any]:
            self.register(name, work, timeout=timeout, group=group)
            return work

        return decorator

    def get(self, name: Optional[str]) -> Optional[Check]:
        """Get check by name."""
        return self._checks.get(name)

    def get_all(self) -> List[Check]:
        """Get all registered checks in registration order."""
        return list(self._checks.values())

    def get_group(self, group: str) -> List[Check]:
        """Get checks carrying a group label."""
        return [c for c in self._checks.values() if c.group == group]

    def freeze(self) -> None:
        """Stop accepting registrations."""
        self._frozen = True

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def __len__(self) -> int:
        return len(self._checks)

    def __contains__(self, name: Optional[str]) -> bool:
        return name in self._checks

    def __iter__(self) -> Iterator[Check]:
        return iter(self.get_all())


__all__ = [
    "CheckRegistry",
]
