"""
CLI to render the camera feed as character art in the terminal.

Usage:
    python scripts/cli.py --camera 0 --scale 16

Press Ctrl-C to quit.
"""
from __future__ import annotations
import argparse, logging, signal, sys, threading
from consolecam.config import Settings
from consolecam.errors import CaptureDeviceLost
from consolecam.pipeline import run_loop

def build_settings(args: argparse.Namespace) -> Settings:
    overrides = {}
    if args.camera is not None:
        overrides["CAMERA_INDEX"] = args.camera
    if args.scale is not None:
        overrides["RAMP_SCALE"] = args.scale
    if args.workers is not None:
        overrides["MAP_WORKERS"] = args.workers
    if args.fps is not None:
        overrides["CAPTURE_FPS"] = args.fps
    return Settings(**overrides)

def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="Live camera feed as terminal character art")
    p.add_argument("--camera", type=int, default=None, help="Capture device index")
    p.add_argument("--scale", type=int, default=None, help="Character ramp size (2, 4, 5, 8, 16, 32)")
    p.add_argument("--workers", type=int, default=None, help="Character mapping threads")
    p.add_argument("--fps", type=float, default=None, help="Requested capture frame rate")
    p.add_argument("--max-frames", type=int, default=None, help="Stop after this many iterations")
    args = p.parse_args(argv)

    settings = build_settings(args)
    logging.basicConfig(level=settings.LOG_LEVEL.upper(),
                        filename=settings.LOG_FILE or None,
                        format="%(asctime)s %(levelname)s %(name)s %(message)s")

    stop = threading.Event()
    # Ctrl-C only sets the event; the loop finishes the frame in flight and exits
    previous = signal.signal(signal.SIGINT, lambda signum, frame: stop.set())
    try:
        run_loop(settings, stop_event=stop, max_iterations=args.max_frames)
    except KeyboardInterrupt:
        stop.set()
    except CaptureDeviceLost as e:
        print(f"\nconsolecam: {e}", file=sys.stderr)
        return 1
    finally:
        signal.signal(signal.SIGINT, previous)
    return 0

if __name__ == "__main__":
    sys.exit(main())
