"""Process control helpers for running deploy commands and handling interrupts."""

import platform
import subprocess
import threading
from pathlib import Path
from typing import List, Optional, Set, Tuple


IS_WINDOWS = platform.system() == "Windows"

_active_processes: Set[subprocess.Popen] = set()
_active_processes_lock = threading.Lock()
_shutdown_event = threading.Event()


def start_tracked_process(command, **kwargs) -> subprocess.Popen:
    """Start a subprocess and track it for interrupt cleanup."""
    process = subprocess.Popen(command, **kwargs)
    with _active_processes_lock:
        _active_processes.add(process)
    return process


def untrack_process(process: subprocess.Popen) -> None:
    """Remove process from tracked set."""
    with _active_processes_lock:
        _active_processes.discard(process)


def terminate_process(process: subprocess.Popen, timeout: float = 2.0) -> None:
    """Terminate a process (and children on Windows) best-effort."""
    if process.poll() is not None:
        return

    try:
        if IS_WINDOWS:
            subprocess.run(
                ["taskkill", "/F", "/T", "/PID", str(process.pid)],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        else:
            process.terminate()
    except OSError:
        pass

    try:
        process.wait(timeout=timeout)
    except subprocess.TimeoutExpired:
        try:
            process.kill()
        except OSError:
            pass


def terminate_all_tracked_processes() -> None:
    """Terminate all tracked subprocesses best-effort."""
    with _active_processes_lock:
        processes = list(_active_processes)

    for process in processes:
        terminate_process(process)
        untrack_process(process)


def request_shutdown() -> None:
    """Signal shutdown and terminate running tracked subprocesses."""
    _shutdown_event.set()
    terminate_all_tracked_processes()


def clear_shutdown_request() -> None:
    """Clear shutdown signal before a new run."""
    _shutdown_event.clear()


def is_shutdown_requested() -> bool:
    """Whether an interrupt asked running commands to stop."""
    return _shutdown_event.is_set()


def run_tracked_command(command: List[str], cwd: Optional[Path] = None) -> Tuple[int, str, str]:
    """Run one command to completion and return ``(returncode, stdout, stderr)``.

    Output is captured so callers can classify failures; echoing it back to
    the terminal is left to the caller. Output is decoded as UTF-8 and
    undecodable bytes are replaced, so a noisy tool never breaks a step. Raises ``OSError`` when the
    executable cannot be started.
    """
    process = start_tracked_process(
        command,
        cwd=str(cwd) if cwd is not None else None,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        encoding="utf-8",
        errors="replace",
    )
    try:
        stdout_text, stderr_text = process.communicate()
    except BaseException:
        terminate_process(process)
        raise
    finally:
        untrack_process(process)

    return process.returncode, stdout_text or "", stderr_text or ""
