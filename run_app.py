"""Launch the wage chat app from the project root. Use: python run_app.py [streamlit args]"""
import subprocess
import sys
from pathlib import Path

app_dir = Path(__file__).resolve().parent / "wage_signal_ai"
# Modules import each other as top-level names (config, agents, ...), so run inside the package dir
subprocess.run(
    [sys.executable, "-m", "streamlit", "run", "app.py", *sys.argv[1:]],
    cwd=app_dir,
    check=True,
)
