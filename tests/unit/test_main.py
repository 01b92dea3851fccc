"""Tests for main entry point."""

import io
import sys
import pytest
from unittest.mock import patch
from main import main, run


class TestMain:
    """Tests for main() and run()."""
    
    def test_main_exit(self, monkeypatch):
        """Test that EXIT returns code 0."""
        monkeypatch.setattr(sys, "stdin", io.StringIO("EXIT\n"))
        monkeypatch.setattr(sys, "stdout", io.StringIO())
        
        assert main() == 0
    
    def test_main_generates_from_stdin(self, monkeypatch):
        """Test a GEN round through the real sampler."""
        stdout = io.StringIO()
        monkeypatch.setattr(sys, "stdin", io.StringIO("GEN 10 2 EXIT\n"))
        monkeypatch.setattr(sys, "stdout", stdout)
        
        assert main() == 0
        
        lines = stdout.getvalue().splitlines()
        index = lines.index("2 random passwords of length 10 :")
        passwords = lines[index + 2:index + 4]
        assert all(len(p) == 10 for p in passwords)
    
    def test_run_exits_with_main_code(self):
        """Test that run() turns the shell's exit code into SystemExit."""
        with patch("main.main", return_value=1):
            with pytest.raises(SystemExit) as exc_info:
                run()
        assert exc_info.value.code == 1
