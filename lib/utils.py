import subprocess
from typing import List


def run_command(command: List[str], cwd: str = None) -> int:
    """Run command with inherited environment and output, raising on a non-zero exit."""
    process = subprocess.run(command, check=True, cwd=cwd)
    return process.returncode
