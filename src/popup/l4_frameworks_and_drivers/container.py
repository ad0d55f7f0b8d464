"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from popup.l2_use_cases.ports.config_loader import ConfigFileLoader
from popup.l2_use_cases.ports.window_host import WindowHost
from popup.l2_use_cases.resolve_config_use_case import ResolveConfigUseCase
from popup.l3_interface_adapters.controllers.config_state import ConfigCell
from popup.l3_interface_adapters.controllers.host_bridge import HostBridge
from popup.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        loader: ConfigFileLoader | None = None,
        host: WindowHost | None = None,
    ) -> None:
        self.loader: ConfigFileLoader = loader or YamlConfigLoader()
        self.state = ConfigCell()
        self.resolver = ResolveConfigUseCase(self.loader)
        self.bridge: HostBridge | None = HostBridge(host, self.state) if host is not None else None
