from .assets import InstallAssetsHook, install_assets
from .themes import InstallThemesAndFilesHook, install_themes_and_files

__all__ = [
    "InstallAssetsHook",
    "InstallThemesAndFilesHook",
    "install_assets",
    "install_themes_and_files",
]
