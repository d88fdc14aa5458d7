"""ShowcaseService: the driver that runs each SOLID example.

Each ``_<principle>`` method builds the variants for one family, hands
them to that family's consumer, and returns the output lines. No
business logic lives here, only wiring.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import TYPE_CHECKING, Any

from solidex.domain.capabilities import CAPABILITIES, Duck, Fish, capabilities_of
from solidex.domain.contracts import declared_operations
from solidex.domain.discounts import DISCOUNT_REGISTRY, Discount, apply_discount
from solidex.domain.products import Product, ProductPrinter
from solidex.domain.storage import STORAGE_REGISTRY, MessageLogger, Storage
from solidex.domain.types import Principle, canonical_order
from solidex.domain.vehicles import Bicycle, Car, Vehicle, describe_vehicle
from solidex.services.base import BaseService
from solidex.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from solidex.config.settings import SolidexSettings
    from solidex.plugins.manager import PluginManager

logger = logging.getLogger(__name__)

HEADER = "SOLID examples:"


class ShowcaseService(BaseService):
    """Runs the SOLID examples and lists their variants."""

    def __init__(
        self,
        settings: SolidexSettings,
        *,
        plugins: PluginManager | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        super().__init__(settings, plugins=plugins)
        self._clock = clock
        self._sections: dict[Principle, Callable[[list[str]], list[str]]] = {
            Principle.SRP: self._srp,
            Principle.OCP: self._ocp,
            Principle.LSP: self._lsp,
            Principle.ISP: self._isp,
            Principle.DIP: self._dip,
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, principles: Sequence[Principle] | None = None) -> ServiceResult:
        """Run the examples for *principles* (config default when None).

        Contract violations raised while wiring propagate to the caller.
        """
        if principles is None:
            principles = self._settings.showcase.principles
        selected = canonical_order(tuple(principles))
        if not selected:
            return ServiceResult(
                ok=False,
                op="run_showcase",
                error=ServiceError(
                    code="NO_PRINCIPLES",
                    message="No principles selected",
                ),
            )

        warnings: list[str] = []
        sections: list[dict[str, Any]] = []
        lines: list[str] = []
        for principle in selected:
            section_lines = self.section(principle, warnings)
            logger.debug("Rendered %s section (%d lines)", principle.label, len(section_lines))
            sections.append(
                {
                    "principle": principle.value,
                    "name": principle.full_name,
                    "lines": section_lines,
                }
            )
            lines.extend(section_lines)
            self._dispatch_event(
                "post_showcase",
                {"principle": principle.value, "lines": list(section_lines)},
                warnings,
            )

        return ServiceResult(
            ok=True,
            op="run_showcase",
            data={"header": HEADER, "sections": sections, "lines": lines},
            warnings=warnings,
        )

    def section(self, principle: Principle, warnings: list[str] | None = None) -> list[str]:
        """Output lines for a single principle, each prefixed ``"<n>. <LABEL> - "``.

        Variants that run but misbehave (a storage that writes nothing)
        are reported in *warnings* when a list is given.
        """
        if warnings is None:
            warnings = []
        prefix = f"{principle.ordinal}. {principle.label} - "
        return [prefix + line for line in self._sections[principle](warnings)]

    def list_variants(self, principle: Principle | None = None) -> ServiceResult:
        """Every abstraction with its variants and declared operations."""
        items = [
            {**row, "principle": row["principle"].value}
            for row in self._variant_rows()
            if principle is None or row["principle"] == principle
        ]
        return ServiceResult(
            ok=True,
            op="list_variants",
            data={"count": len(items), "items": items},
        )

    # ------------------------------------------------------------------
    # Examples
    # ------------------------------------------------------------------

    def _product(self) -> Product:
        cfg = self._settings.product
        return Product(name=cfg.name, price=cfg.price)

    def _srp(self, warnings: list[str]) -> list[str]:
        printer = ProductPrinter(currency=self._settings.output.currency)
        return [printer.print_product(self._product())]

    def _ocp(self, warnings: list[str]) -> list[str]:
        product = self._product()
        currency = self._settings.output.currency
        return [
            f"Price with {name} discount: {apply_discount(product, discount_cls())}{currency}"
            for name, discount_cls in DISCOUNT_REGISTRY.items()
        ]

    def _lsp(self, warnings: list[str]) -> list[str]:
        unit = self._settings.output.speed_unit
        vehicles: list[tuple[str, Vehicle]] = [("Car", Car()), ("Bicycle", Bicycle())]
        return [f"{label}: {describe_vehicle(vehicle, unit)}" for label, vehicle in vehicles]

    def _isp(self, warnings: list[str]) -> list[str]:
        duck = Duck()
        fish = Fish()
        return [f"{duck.fly()}, {duck.swim()}", fish.swim()]

    def _dip(self, warnings: list[str]) -> list[str]:
        cfg = self._settings.logger
        lines: list[str] = []
        for name, storage_cls in STORAGE_REGISTRY.items():
            written: list[str] = []
            storage = storage_cls(echo=written.append)
            message_logger = MessageLogger(
                storage,
                clock=self._clock,
                timestamp_format=cfg.timestamp_format,
            )
            message_logger.log(cfg.message_template.format(destination=storage_cls.destination))
            if len(written) != 1:
                warnings.append(
                    f"Storage variant {name!r} wrote {len(written)} line(s) for one log entry"
                )
            lines.extend(written)
        return lines

    # ------------------------------------------------------------------
    # Variant listing
    # ------------------------------------------------------------------

    def _variant_rows(self) -> list[dict[str, Any]]:
        rows: list[dict[str, Any]] = [
            _row(Principle.SRP, "ProductPrinter", "default", ProductPrinter, ["print_product"]),
        ]
        for name, cls in DISCOUNT_REGISTRY.items():
            rows.append(
                _row(
                    Principle.OCP,
                    Discount.__name__,
                    name,
                    cls,
                    declared_operations(Discount),
                    builtin=DISCOUNT_REGISTRY.is_builtin(name),
                )
            )
        for cls in (Car, Bicycle):
            rows.append(
                _row(
                    Principle.LSP,
                    Vehicle.__name__,
                    cls.__name__.lower(),
                    cls,
                    declared_operations(Vehicle),
                )
            )
        for entity_cls in (Duck, Fish):
            capabilities = capabilities_of(entity_cls())
            rows.append(
                _row(
                    Principle.ISP,
                    ", ".join(CAPABILITIES[c].__name__ for c in capabilities),
                    entity_cls.__name__.lower(),
                    entity_cls,
                    capabilities,
                )
            )
        for name, cls in STORAGE_REGISTRY.items():
            rows.append(
                _row(
                    Principle.DIP,
                    Storage.__name__,
                    name,
                    cls,
                    declared_operations(Storage),
                    builtin=STORAGE_REGISTRY.is_builtin(name),
                )
            )
        return rows


def _row(
    principle: Principle,
    abstraction: str,
    name: str,
    cls: type,
    operations: list[str],
    *,
    builtin: bool = True,
) -> dict[str, Any]:
    return {
        "principle": principle,
        "abstraction": abstraction,
        "variant": name,
        "class": cls.__name__,
        "operations": operations,
        "builtin": builtin,
    }
