"""Media container inspection."""

from reel_template.media_probe.probe import MediaInfo, MediaProbe

__all__ = ["MediaInfo", "MediaProbe"]
