"""
Tests for service/commands.py

These run real short-lived shell commands rather than mocks.
"""

import asyncio
import tempfile
from pathlib import Path

from django.test import SimpleTestCase

from videos.service.commands import run_command


class RunCommandTest(SimpleTestCase):
    def setUp(self):
        self._temp_dir = tempfile.TemporaryDirectory()
        self.marker = Path(self._temp_dir.name) / 'marker'

    def tearDown(self):
        self._temp_dir.cleanup()

    def _late_marker_cmd(self):
        """Shell command that writes the marker file after one second"""
        return ['sh', '-c', f'sleep 1; touch {self.marker}']

    async def test_captures_output_and_exit_code(self):
        result = await run_command(['sh', '-c', 'printf out; printf err >&2; exit 3'])

        self.assertEqual(result.returncode, 3)
        self.assertEqual(result.stdout, 'out')
        self.assertEqual(result.stderr, 'err')

    async def test_invalid_utf8_is_replaced(self):
        result = await run_command(['sh', '-c', r"printf '\377ok'"])

        self.assertEqual(result.returncode, 0)
        self.assertTrue(result.stdout.endswith('ok'))

    async def test_arguments_are_stringified(self):
        result = await run_command(['echo', Path('/tmp/clip.mp4'), 42])

        self.assertEqual(result.stdout.strip(), '/tmp/clip.mp4 42')

    async def test_missing_executable(self):
        with self.assertRaises(FileNotFoundError):
            await run_command(['tubely-no-such-binary', '--version'])

    async def test_timeout_kills_process(self):
        with self.assertRaises(asyncio.TimeoutError):
            await run_command(self._late_marker_cmd(), timeout=0.2)

        await asyncio.sleep(1.5)
        self.assertFalse(self.marker.exists(), 'process kept running after timeout')

    async def test_cancellation_kills_process(self):
        task = asyncio.ensure_future(run_command(self._late_marker_cmd(), timeout=30))
        await asyncio.sleep(0.2)
        task.cancel()

        with self.assertRaises(asyncio.CancelledError):
            await task

        await asyncio.sleep(1.5)
        self.assertFalse(self.marker.exists(), 'process kept running after cancellation')
