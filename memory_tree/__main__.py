from __future__ import annotations
import argparse
from pathlib import Path

from memory_tree.app.config import AppConfig
from memory_tree.app.main import run


def parse_args(argv=None) -> AppConfig:
    parser = argparse.ArgumentParser(
        prog="memory-tree",
        description="Gesture-driven 3D tree of decorations and photos",
    )
    parser.add_argument("--camera", type=int, default=0, help="camera device index")
    parser.add_argument("--no-camera", action="store_true", help="keyboard control only")
    parser.add_argument("--model", type=Path, default=Path("models/hand_landmarker.task"),
                        help="MediaPipe hand_landmarker.task bundle")
    parser.add_argument("--photos", type=Path, nargs="*", default=[],
                        help="image files or directories added with P")
    parser.add_argument("--decorations", type=int, default=1500)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    return AppConfig(
        use_camera=not args.no_camera,
        camera_device=args.camera,
        model_path=args.model,
        photo_paths=list(args.photos),
        decoration_count=args.decorations,
        seed=args.seed,
    )


def main() -> None:
    run(parse_args())


if __name__ == "__main__":
    main()
