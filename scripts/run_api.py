import subprocess
import sys
import os
from pathlib import Path

project_root = Path(__file__).parent.parent
src_path = str(project_root / "src")

# Add src to path for internal imports
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from portal_tool.config.settings import get_settings


def main():
    os.chdir(project_root)
    settings = get_settings()

    # Ensure src is in python path
    env = os.environ.copy()
    if "PYTHONPATH" in env:
        env["PYTHONPATH"] = f"{src_path}{os.pathsep}{env['PYTHONPATH']}"
    else:
        env["PYTHONPATH"] = src_path

    print("Starting Portal Tool API (FastAPI)...")
    try:
        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "portal_tool.api.main:app",
            "--host", settings.host,
            "--port", str(settings.port),
            "--reload"
        ], env=env)
    except KeyboardInterrupt:
        print("\nAPI stopped.")

if __name__ == "__main__":
    main()
