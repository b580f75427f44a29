"""The Probe: reads container metadata from a local media file with ffprobe."""

import asyncio
import contextlib
import json
import logging
import math
import shutil
from pathlib import Path

from pydantic import Field

from reel_template.common.base_template_model import BaseTemplateModel

logger = logging.getLogger(__name__)

FALLBACK_DURATION_SECONDS = 60.0
DEFAULT_PROBE_TIMEOUT_SECONDS = 10.0


class MediaInfo(BaseTemplateModel):
    """Basic container metadata for one media file."""

    duration_seconds: float = Field(gt=0)
    is_fallback: bool = False


class ProbeFailure(Exception):
    """ffprobe could not produce a usable duration."""


class MediaProbe:
    """Extracts duration from a media file, never failing the caller."""

    def __init__(
        self,
        ffprobe_path: str = "ffprobe",
        timeout_seconds: float = DEFAULT_PROBE_TIMEOUT_SECONDS,
        fallback_duration_seconds: float = FALLBACK_DURATION_SECONDS,
    ) -> None:
        self._ffprobe_path = ffprobe_path
        self._timeout_seconds = timeout_seconds
        self._fallback_duration_seconds = fallback_duration_seconds

    async def probe(self, media_path: Path) -> MediaInfo:
        """Get the duration of a media file.

        Any failure (missing binary, unreadable file, non-zero exit, timeout,
        unparsable output) yields the fallback duration instead of an error.

        Args:
            media_path: Path to a local media file.

        Returns:
            MediaInfo with the probed or fallback duration.
        """
        try:
            duration = await self._probe_duration(Path(media_path))
        except ProbeFailure as e:
            logger.warning(
                "Probe failed for %s, using fallback duration %.1fs: %s",
                media_path,
                self._fallback_duration_seconds,
                e,
            )
            return MediaInfo(
                duration_seconds=self._fallback_duration_seconds,
                is_fallback=True,
            )

        logger.info("Probed %s: duration=%.2fs", media_path, duration)
        return MediaInfo(duration_seconds=duration)

    async def _probe_duration(self, media_path: Path) -> float:
        if shutil.which(self._ffprobe_path) is None:
            msg = f"{self._ffprobe_path} not found"
            raise ProbeFailure(msg)

        if not media_path.is_file():
            msg = f"Media file not found: {media_path}"
            raise ProbeFailure(msg)

        cmd = [
            self._ffprobe_path,
            "-v", "quiet",
            "-print_format", "json",
            "-show_format",
            str(media_path),
        ]

        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            msg = f"Could not start {self._ffprobe_path}: {e}"
            raise ProbeFailure(msg) from e

        try:
            stdout, stderr = await asyncio.wait_for(
                proc.communicate(), timeout=self._timeout_seconds
            )
        except TimeoutError as e:
            _kill(proc)
            await proc.wait()
            msg = f"ffprobe timed out after {self._timeout_seconds:.0f}s"
            raise ProbeFailure(msg) from e
        except asyncio.CancelledError:
            _kill(proc)
            # Reap the child even though this task is being cancelled
            await asyncio.shield(proc.wait())
            raise

        if proc.returncode != 0:
            msg = f"ffprobe exited with {proc.returncode}: {stderr.decode(errors='replace')}"
            raise ProbeFailure(msg)

        return _parse_duration(stdout)


def _kill(proc: asyncio.subprocess.Process) -> None:
    with contextlib.suppress(ProcessLookupError):
        proc.kill()


def _parse_duration(stdout: bytes) -> float:
    """Parse the format duration from ffprobe JSON output."""
    try:
        data = json.loads(stdout.decode())
        duration = float(data["format"]["duration"])
    except (json.JSONDecodeError, UnicodeDecodeError, KeyError, TypeError, ValueError) as e:
        msg = f"Failed to parse ffprobe output: {e}"
        raise ProbeFailure(msg) from e

    if not math.isfinite(duration) or duration <= 0:
        msg = f"Invalid duration reported: {duration}"
        raise ProbeFailure(msg)

    return duration
