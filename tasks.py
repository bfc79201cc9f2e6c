""" Invoke tasks. """
import io
import sys
from pathlib import Path
from invoke.tasks import task
from config.paths import DATA_DIR, LOG_PATH

if isinstance(sys.stdout, io.TextIOWrapper):
    sys.stdout.reconfigure(encoding='utf-8')


@task
def install(c):
    c.run('pip install -e ".[test]"')


@task
def serve(c, port=8001):
    c.run(f"uvicorn main:app --reload --host 127.0.0.1 --port {port}")


@task
def test(c):
    c.run("pytest -q", env={"PYTHONUTF8": "1"})


@task
def clean(c, data=False):
    """
    Remove bytecode caches. With --data, also remove the local plan store and logs.
    """
    root = Path(__file__).parent
    for cache in root.rglob("__pycache__"):
        c.run(f'rm -rf "{cache}"', warn=True)
    if data:
        c.run(f'rm -rf "{DATA_DIR}" "{LOG_PATH}"', warn=True)
