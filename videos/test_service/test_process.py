"""
Tests for service/process.py
"""

import asyncio
from pathlib import Path
from unittest.mock import AsyncMock, patch

from django.test import SimpleTestCase

from videos.service.commands import CommandResult
from videos.service.errors import MediaRepackagingError
from videos.service.process import fast_start_path_for, process_video_for_fast_start


class FastStartPathTest(SimpleTestCase):
    def test_appends_processed_suffix(self):
        self.assertEqual(
            fast_start_path_for('/tmp/abc.mp4'), Path('/tmp/abc.mp4.processed')
        )


class ProcessVideoForFastStartTest(SimpleTestCase):
    @patch('videos.service.process.run_command', new_callable=AsyncMock)
    async def test_remuxes_with_stream_copy(self, mock_run):
        mock_run.return_value = CommandResult(returncode=0, stdout='', stderr='')

        output = await process_video_for_fast_start('/tmp/abc.mp4', timeout=30)

        self.assertEqual(output, Path('/tmp/abc.mp4.processed'))
        cmd = mock_run.call_args[0][0]
        self.assertEqual(cmd[0], 'ffmpeg')
        self.assertEqual(cmd[cmd.index('-i') + 1], '/tmp/abc.mp4')
        self.assertEqual(cmd[cmd.index('-movflags') + 1], 'faststart')
        self.assertEqual(cmd[cmd.index('-codec') + 1], 'copy')
        self.assertEqual(cmd[cmd.index('-map_metadata') + 1], '0')
        self.assertEqual(cmd[cmd.index('-f') + 1], 'mp4')
        self.assertEqual(cmd[-1], '/tmp/abc.mp4.processed')
        self.assertEqual(mock_run.call_args[1]['timeout'], 30)

    @patch('videos.service.process.run_command', new_callable=AsyncMock)
    async def test_logs_command(self, mock_run):
        mock_run.return_value = CommandResult(returncode=0, stdout='', stderr='')
        messages = []

        await process_video_for_fast_start('/tmp/abc.mp4', logger=messages.append)

        self.assertTrue(any(m.startswith('Running: ffmpeg') for m in messages))

    @patch('videos.service.process.run_command', new_callable=AsyncMock)
    async def test_nonzero_exit_raises(self, mock_run):
        mock_run.return_value = CommandResult(
            returncode=1, stdout='', stderr='moov atom not found'
        )

        with self.assertRaises(MediaRepackagingError) as ctx:
            await process_video_for_fast_start('/tmp/abc.mp4')

        self.assertIn('moov atom not found', ctx.exception.detail)

    @patch('videos.service.process.run_command', new_callable=AsyncMock)
    async def test_timeout_raises(self, mock_run):
        mock_run.side_effect = asyncio.TimeoutError()

        with self.assertRaises(MediaRepackagingError):
            await process_video_for_fast_start('/tmp/abc.mp4', timeout=1)

    @patch('videos.service.process.run_command', new_callable=AsyncMock)
    async def test_missing_ffmpeg_raises(self, mock_run):
        mock_run.side_effect = FileNotFoundError('ffmpeg')

        with self.assertRaises(MediaRepackagingError):
            await process_video_for_fast_start('/tmp/abc.mp4')
