"""CLI state container."""

from ..configs import Configs
from ..resolution import EnvironmentSource


class CLIState:
    """Shared state for CLI commands.

    Configuration is resolved lazily so that commands which only describe the
    key contract never read the environment.
    """

    def __init__(
        self,
        configs: Configs | None = None,
        source: EnvironmentSource | None = None,
    ):
        self._configs = configs
        self.source = source

    @property
    def configs(self) -> Configs:
        if self._configs is None:
            self._configs = Configs.from_environment(source=self.source)
        return self._configs
