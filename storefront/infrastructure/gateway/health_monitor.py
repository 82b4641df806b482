"""Health Monitor — parallel liveness checks for both services, with optional polling."""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal

from storefront.application.schemas import HealthResponse
from storefront.infrastructure.gateway.service_apis import ProductApi, UserApi
from storefront.infrastructure.logging.colored_logger import GatewayLogger, GatewayStage

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 30.0

ServiceKey = Literal["product", "user"]


@dataclass
class ServiceHealth:
    healthy: bool = False
    details: HealthResponse | None = None
    last_checked: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class HealthSnapshot:
    """Latest known state of both services."""

    product_service: ServiceHealth = field(default_factory=ServiceHealth)
    user_service: ServiceHealth = field(default_factory=ServiceHealth)
    error: str | None = None

    @property
    def all_healthy(self) -> bool:
        return self.product_service.healthy and self.user_service.healthy


class HealthMonitor:
    """Fans health checks out to both services and joins the results.

    Each branch succeeds or fails independently: one unreachable service
    never hides the other's status. Periodic polling runs as an asyncio.Task;
    a tick that fires while the previous cycle is still in flight is skipped.
    """

    def __init__(
        self,
        product_api: ProductApi,
        user_api: UserApi,
        interval: float = DEFAULT_INTERVAL,
    ) -> None:
        self.interval = interval
        self._apis: dict[ServiceKey, ProductApi | UserApi] = {
            "product": product_api,
            "user": user_api,
        }
        self._snapshot = HealthSnapshot()
        self._cycle_lock = asyncio.Lock()
        self._task: asyncio.Task | None = None
        self._cycles: set[asyncio.Task] = set()
        self._log = GatewayLogger("ClientGateway")
        self.skipped_cycles = 0

    @property
    def snapshot(self) -> HealthSnapshot:
        return self._snapshot

    @property
    def is_polling(self) -> bool:
        return self._task is not None and not self._task.done()

    async def check_all(self) -> HealthSnapshot:
        """Check both services concurrently and replace the snapshot."""
        with self._log.timed_step(GatewayStage.HEALTH, "Checking all services") as outcome:
            results = await asyncio.gather(
                self._apis["product"].check_health(),
                self._apis["user"].check_health(),
                return_exceptions=True,
            )
            self._snapshot = self._join(results)
            outcome["product"] = self._snapshot.product_service.healthy
            outcome["user"] = self._snapshot.user_service.healthy
        return self._snapshot

    def _join(self, results: list) -> HealthSnapshot:
        timestamp = datetime.now(timezone.utc)
        errors: list[str] = []
        states: list[ServiceHealth] = []
        for key, result in zip(("product", "user"), results):
            name = self._apis[key].service_name
            if isinstance(result, BaseException):
                errors.append(f"{name}: {result}")
                states.append(ServiceHealth(healthy=False, last_checked=timestamp))
                continue
            healthy = result.status == "healthy"
            if not healthy:
                errors.append(f"{name}: unhealthy")
            states.append(ServiceHealth(healthy=healthy, details=result, last_checked=timestamp))

        return HealthSnapshot(
            product_service=states[0],
            user_service=states[1],
            error=", ".join(errors) or None,
        )

    async def check_service(self, service: ServiceKey) -> HealthSnapshot:
        """Check a single service, leaving the other's last result untouched."""
        api = self._apis[service]
        details = await api.check_health()
        state = ServiceHealth(healthy=details.status == "healthy", details=details)

        current = self._snapshot
        if service == "product":
            self._snapshot = HealthSnapshot(product_service=state, user_service=current.user_service)
        else:
            self._snapshot = HealthSnapshot(product_service=current.product_service, user_service=state)
        if not state.healthy:
            self._snapshot.error = f"{api.service_name}: unhealthy"
        return self._snapshot

    async def start_auto_check(self, interval: float | None = None) -> None:
        """Start (or restart) periodic health checks.

        ``interval`` overrides the monitor's configured polling interval (seconds).
        """
        interval = self.interval if interval is None else interval
        await self.stop_auto_check()
        self._task = asyncio.create_task(self._loop(interval))
        logger.info("Health polling started (every %.1fs)", interval)

    async def stop_auto_check(self) -> None:
        """Stop polling and cancel any cycle still in flight."""
        tasks = [t for t in (self._task, *self._cycles) if t is not None]
        self._task = None
        for task in tasks:
            task.cancel()
        for task in tasks:
            try:
                await task
            except asyncio.CancelledError:
                pass
        if tasks:
            logger.info("Health polling stopped")

    async def _loop(self, interval: float) -> None:
        while True:
            await asyncio.sleep(interval)
            if self._cycle_lock.locked():
                self.skipped_cycles += 1
                logger.debug("Previous health cycle still running — skipping tick")
                continue
            cycle = asyncio.create_task(self._run_cycle())
            self._cycles.add(cycle)
            cycle.add_done_callback(self._cycles.discard)

    async def _run_cycle(self) -> None:
        async with self._cycle_lock:
            try:
                await self.check_all()
            except Exception:
                logger.exception("Health polling cycle failed")
