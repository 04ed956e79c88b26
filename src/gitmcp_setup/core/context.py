"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from gitmcp_setup.cli.config import CONFIG_DIR_NAME, LoadedConfig, load_config
from gitmcp_setup.core.command_catalog import CommandCatalog
from gitmcp_setup.core.probe import EnvironmentProbe
from gitmcp_setup.gateway.console.abc import Console
from gitmcp_setup.gateway.console.real import InteractiveConsole
from gitmcp_setup.gateway.process.abc import ProcessRunner
from gitmcp_setup.gateway.process.real import RealProcessRunner


@dataclass(frozen=True)
class SetupContext:
    """Immutable context holding all dependencies for one invocation.

    Created at CLI entry point and threaded through the commands.
    """

    runner: ProcessRunner
    console: Console
    catalog: CommandCatalog
    config: LoadedConfig
    cwd: Path

    @property
    def probe(self) -> EnvironmentProbe:
        return EnvironmentProbe(self.runner, self.catalog, self.cwd)

    @staticmethod
    def for_test(
        runner: ProcessRunner | None = None,
        console: Console | None = None,
        catalog: CommandCatalog | None = None,
        config: LoadedConfig | None = None,
        cwd: Path | None = None,
    ) -> "SetupContext":
        """Create test context with fakes for any unspecified dependency.

        Args:
            runner: Optional ProcessRunner. If None, every command fails.
            console: Optional Console. If None, any prompt aborts.
            catalog: Optional CommandCatalog. If None, uses the default helper.
            config: Optional LoadedConfig. If None, uses defaults.
            cwd: Optional working directory. If None, uses Path("/test/default/cwd").

        Example:
            >>> runner = FakeProcessRunner(succeeding={("which", "git-mcp-server")})
            >>> ctx = SetupContext.for_test(runner=runner, console=FakeConsole(responses=["n"]))
        """
        from gitmcp_setup.gateway.console.fake import FakeConsole
        from gitmcp_setup.gateway.process.fake import FakeProcessRunner

        return SetupContext(
            runner=runner if runner is not None else FakeProcessRunner(),
            console=console if console is not None else FakeConsole(),
            catalog=catalog if catalog is not None else CommandCatalog.for_helper(),
            config=config if config is not None else LoadedConfig.defaults(),
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
        )


def create_context(cwd: Path | None = None) -> SetupContext:
    """Create production context with real implementations.

    Raises:
        ConfigError: if .gitmcp/config.toml is present but unusable
    """
    if cwd is None:
        cwd = Path.cwd()
    config = load_config(cwd / CONFIG_DIR_NAME)
    return SetupContext(
        runner=RealProcessRunner(),
        console=InteractiveConsole(),
        catalog=CommandCatalog.for_helper(config.helper_name),
        config=config,
        cwd=cwd,
    )
