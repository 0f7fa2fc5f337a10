import subprocess
import sys
from pathlib import Path

from loguru import logger

from music_queue.exceptions import InstallError
from music_queue.tools.base import (
    YT_DLP_RELEASE,
    ToolProvider,
    download_file,
    run_command,
)
from music_queue.types import TOOL

PACKAGE_MANAGERS: dict[str, list[str]] = {
    "apt": ["sudo", "apt", "install", "-y"],
    "pacman": ["sudo", "pacman", "-S", "--noconfirm"],
    "dnf": ["sudo", "dnf", "install", "-y"],
    "yum": ["sudo", "yum", "install", "-y"],
    "zypper": ["sudo", "zypper", "install", "-y"],
}
DISTRO_MANAGERS: dict[str, list[str]] = {
    "arch": ["pacman"],
    "manjaro": ["pacman"],
    "endeavouros": ["pacman"],
    "ubuntu": ["apt"],
    "debian": ["apt"],
    "linuxmint": ["apt"],
    "pop": ["apt"],
    "fedora": ["dnf", "yum"],
    "rhel": ["dnf", "yum"],
    "centos": ["dnf", "yum"],
    "rocky": ["dnf", "yum"],
    "alma": ["dnf", "yum"],
    "opensuse": ["zypper"],
    "suse": ["zypper"],
}
RELEASE_MARKERS = {
    "etc/arch-release": "arch",
    "etc/fedora-release": "fedora",
    "etc/redhat-release": "rhel",
    "etc/debian_version": "debian",
}


def _read_field(file: Path, field: str) -> str | None:
    try:
        lines = file.read_text().splitlines()
    except OSError:
        return None

    for line in lines:
        if line.startswith(field + "="):
            return line[len(field) + 1 :].strip().strip('"').lower() or None

    return None


def detect_distro(root: Path = Path("/")) -> str | None:
    """Lowercase distribution ID, like `arch` or `ubuntu`."""

    if distro := _read_field(root / "etc/os-release", "ID"):
        return distro

    if distro := _read_field(root / "etc/lsb-release", "DISTRIB_ID"):
        return distro

    for marker, distro in RELEASE_MARKERS.items():
        if (root / marker).exists():
            return distro

    try:
        output = subprocess.run(
            ["lsb_release", "-is"],
            capture_output=True,
            text=True,
            check=False,
        ).stdout
    except OSError:
        return None

    return output.strip().lower() or None


class LinuxProvider(ToolProvider):
    name = "linux"

    def __init__(self, root: Path = Path("/")):
        super().__init__()
        self.root = root

    @property
    def search_paths(self) -> list[Path]:
        return [
            Path("/usr/local/bin"),
            Path("/usr/bin"),
            Path("/bin"),
            Path.home() / ".local" / "bin",
        ]

    def managers(self) -> list[str]:
        """Package managers to try, most specific first."""

        distro = detect_distro(self.root)

        if distro and distro in DISTRO_MANAGERS:
            logger.info("Detected Linux distribution: {distro}", distro=distro)
            return DISTRO_MANAGERS[distro]

        if distro:
            logger.info(
                "Unknown distribution {distro}, trying common package managers...",
                distro=distro,
            )
        else:
            logger.info(
                "Could not detect Linux distribution, trying common package managers..."
            )

        return list(PACKAGE_MANAGERS)

    def install(self, tool: TOOL) -> None:
        for manager in self.managers():
            logger.info("Using {manager} for installation...", manager=manager)
            if run_command(*PACKAGE_MANAGERS[manager], tool):
                return

        if tool != "yt-dlp":
            raise InstallError(
                f"Could not install {tool} with any known package manager."
            )

        logger.info("Trying to install via pip...")
        if run_command(sys.executable, "-m", "pip", "install", "--user", "yt-dlp"):
            return

        logger.info("Installing yt-dlp directly...")
        download_file(
            YT_DLP_RELEASE + "yt-dlp",
            Path.home() / ".local" / "bin" / "yt-dlp",
        )
