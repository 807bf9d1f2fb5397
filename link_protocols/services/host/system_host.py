"""Default host environment backed by the platform browser and viewer commands."""

import subprocess
import webbrowser

from link_protocols.core.config import AppConfig, get_config
from link_protocols.utils.logger import get_logger

logger = get_logger(__name__)


class SystemHost:
    """Opens URLs in a web browser and manuals with the ``info``/``man`` viewers."""

    def __init__(self, config: AppConfig | None = None):
        self.config = config if config is not None else get_config()

    def open_url(self, url: str, other_window: bool = False) -> bool:
        browser_name = self.config.host.browser
        try:
            controller = webbrowser.get(browser_name)
        except webbrowser.Error as e:
            logger.error(f"[HOST] Browser {browser_name!r} unavailable: {e}")
            return False

        opened = controller.open(url, new=1 if other_window else 0)
        if not opened:
            logger.warning(f"[HOST] Browser refused to open {url}")
        return opened

    def open_info(self, manual: str, node: str = "Top", other_window: bool = False) -> bool:
        return self._run_viewer([self.config.host.info_command, f"({manual}){node}"])

    def open_man_page(
        self, name: str, section: str | None = None, other_window: bool = False
    ) -> bool:
        cmd = [self.config.host.man_command]
        if section:
            cmd.append(section)
        cmd.append(name)
        return self._run_viewer(cmd)

    def _run_viewer(self, cmd: list[str]) -> bool:
        logger.info(f"[HOST] Running viewer: {' '.join(cmd)}")
        try:
            result = subprocess.run(cmd, check=False, timeout=self.config.host.command_timeout)
        except FileNotFoundError:
            logger.error(f"[HOST] Viewer executable not found: {cmd[0]}")
            return False
        except subprocess.TimeoutExpired:
            logger.warning(f"[HOST] Viewer timed out: {cmd[0]}")
            return False

        if result.returncode != 0:
            logger.warning(f"[HOST] Viewer {cmd[0]} exited with status {result.returncode}")
            return False
        return True
