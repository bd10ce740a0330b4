import logging
import unittest
from unittest.mock import patch, MagicMock

from llmwrap.errors import ExecutionError
from llmwrap.executor import CommandExecutor, ExecutionOutcome


@patch('llmwrap.executor.platform.system', return_value="Linux")
class TestCommandExecutor(unittest.TestCase):
    """Test cases for the CommandExecutor class."""

    def setUp(self):
        """Set up test fixtures."""
        self.executor = CommandExecutor()

    @patch('llmwrap.executor.subprocess.Popen')
    def test_execute_command_success(self, mock_popen, _mock_system):
        """Test successful command execution."""
        process_mock = MagicMock()
        process_mock.wait.return_value = 0
        mock_popen.return_value = process_mock

        outcome = self.executor.execute_command("tar -xf 'my archive.tar.gz'")

        self.assertEqual(outcome, ExecutionOutcome(exit_code=0, signaled=False))

        # The command string goes to the shell untouched, with inherited stdio
        mock_popen.assert_called_once()
        args, kwargs = mock_popen.call_args
        self.assertEqual(args[0], ["/bin/sh", "-c", "tar -xf 'my archive.tar.gz'"])
        self.assertNotIn("stdout", kwargs)
        self.assertNotIn("stderr", kwargs)
        self.assertNotIn("stdin", kwargs)

    @patch('llmwrap.executor.subprocess.Popen')
    def test_execute_command_failure(self, mock_popen, _mock_system):
        """Test that a non-zero exit is reported, not raised."""
        process_mock = MagicMock()
        process_mock.wait.return_value = 3
        mock_popen.return_value = process_mock

        outcome = self.executor.execute_command("false")

        self.assertEqual(outcome.exit_code, 3)
        self.assertFalse(outcome.signaled)

    @patch('llmwrap.executor.subprocess.Popen')
    def test_failure_is_logged_below_warning(self, mock_popen, _mock_system):
        """Test that a non-zero exit does not print a warning when not verbose."""
        mock_popen.return_value.wait.return_value = 1

        with self.assertLogs('llmwrap.executor', level='INFO') as cm:
            self.executor.execute_command("grep nothing file.txt")

        self.assertTrue(all(record.levelno == logging.INFO for record in cm.records))

    @patch('llmwrap.executor.subprocess.Popen')
    def test_execute_command_signaled(self, mock_popen, _mock_system):
        """Test that a child killed by a signal maps to 128 + signal."""
        process_mock = MagicMock()
        process_mock.wait.return_value = -15
        mock_popen.return_value = process_mock

        outcome = self.executor.execute_command("sleep 100")

        self.assertEqual(outcome.exit_code, 143)
        self.assertTrue(outcome.signaled)

    @patch('llmwrap.executor.subprocess.Popen')
    def test_custom_shell(self, mock_popen, _mock_system):
        mock_popen.return_value.wait.return_value = 0

        CommandExecutor(shell="/bin/bash").execute_command("echo hi")

        args, _ = mock_popen.call_args
        self.assertEqual(args[0], ["/bin/bash", "-c", "echo hi"])

    @patch('llmwrap.executor.subprocess.Popen')
    def test_spawn_failure(self, mock_popen, _mock_system):
        """Test that a missing shell raises ExecutionError."""
        mock_popen.side_effect = FileNotFoundError("No such file or directory: '/no/shell'")

        with self.assertRaises(ExecutionError):
            CommandExecutor(shell="/no/shell").execute_command("ls")


if __name__ == "__main__":
    unittest.main()
