"""
Async wrapper around external media tools.

ffprobe and ffmpeg run as child processes awaited by the calling request, so
a long remux only suspends the request that started it. A child never
outlives the await: on timeout or cancellation it is killed and reaped.
"""

import asyncio
from dataclasses import dataclass


@dataclass
class CommandResult:
    """Exit status and decoded output of a finished command"""
    returncode: int
    stdout: str
    stderr: str


async def run_command(cmd, timeout=None):
    """
    Run a command and capture its output.

    Args:
        cmd: Argument list, e.g. ['ffprobe', '-v', 'error', ...]
        timeout: Seconds to wait before killing the process (None waits forever)

    Returns:
        CommandResult

    Raises:
        FileNotFoundError: If the executable doesn't exist
        asyncio.TimeoutError: If the process outlives timeout; it is killed first
        asyncio.CancelledError: If the awaiting request is cancelled; the
            process is killed first
    """
    proc = await asyncio.create_subprocess_exec(
        *[str(arg) for arg in cmd],
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    try:
        stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout)
    finally:
        # The child must not outlive the caller, or it can rewrite files
        # the caller has already cleaned up.
        if proc.returncode is None:
            proc.kill()
            await asyncio.shield(proc.wait())

    return CommandResult(
        returncode=proc.returncode,
        stdout=stdout.decode('utf-8', errors='replace'),
        stderr=stderr.decode('utf-8', errors='replace'),
    )
