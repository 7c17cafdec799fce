"""
main.py — Application entry point.

One loop iteration is one tick:

    Camera → HandTracker → SceneController.submit_frame
          → SceneController.tick → SceneRenderer → OpenCVUI

Vision is optional: without a camera or model the scene still runs and
answers the keyboard.
"""
from __future__ import annotations
import time
from typing import Optional, Tuple

import numpy as np

from memory_tree.app.config import AppConfig, default_config
from memory_tree.app.photos import PhotoQueue, load_photo
from memory_tree.app.renderer import SceneRenderer, make_decorations, make_photo
from memory_tree.app.ui import OpenCVUI
from memory_tree.core.camera import Camera
from memory_tree.core.choreographer import Choreographer
from memory_tree.core.gesture_classifier import GestureClassifier
from memory_tree.core.hand_tracker import HandTracker
from memory_tree.core.scene import SceneController
from memory_tree.core.state_stabilizer import StateStabilizer
from memory_tree.domain.enums import HandGesture, Mode

_MODE_COMMANDS = {"tree": Mode.TREE, "scatter": Mode.SCATTER, "focus": Mode.FOCUS}


def build_scene(config: AppConfig, rng: np.random.Generator) -> SceneController:
    """Wire the core from the configuration."""
    return SceneController(
        choreographer=Choreographer(rng=rng, ease=config.ease),
        classifier=GestureClassifier(
            pinch_threshold=config.pinch_threshold,
            fist_threshold=config.fist_threshold,
            open_threshold=config.open_threshold,
        ),
        stabilizer=StateStabilizer(config.gesture_window, config.gesture_consensus),
        rng=rng,
    )


def open_vision(config: AppConfig) -> Tuple[Optional[Camera], Optional[HandTracker]]:
    """Open camera and tracker; any failure leaves that part out."""
    if not config.use_camera:
        return None, None

    try:
        camera = Camera(config.camera_device, config.fps_limit)
    except RuntimeError as exc:
        print(f"[WARN] {exc}, running without gestures")
        return None, None

    try:
        tracker = HandTracker(
            config.model_path,
            min_detection_confidence=config.min_detection_confidence,
            min_tracking_confidence=config.min_tracking_confidence,
        )
    except (FileNotFoundError, RuntimeError) as exc:
        print(f"[WARN] Hand tracker unavailable: {exc}, running without gestures")
        tracker = None
    return camera, tracker


def add_next_photo(scene: SceneController, photos: PhotoQueue) -> None:
    path = photos.next_path()
    if path is None:
        print("[WARN] No photos configured (use --photos)")
        return
    image = load_photo(path)
    if image is None:
        print(f"[WARN] Cannot read photo {path}")
        return
    scene.add_photo(make_photo(image))
    print(f"[PHOTO] {path.name} added")


def dispatch(command: str, scene: SceneController, photos: PhotoQueue, ui: OpenCVUI) -> None:
    if command == "start":
        scene.set_gesture_enabled(True)
        scene.set_mode(Mode.TREE)
    elif command == "reset":
        scene.set_gesture_enabled(False)
        scene.reset_to_initial()
    elif command == "photo":
        add_next_photo(scene, photos)
    elif command == "hud":
        ui.show_hud = not ui.show_hud
    elif command in _MODE_COMMANDS:
        scene.set_mode(_MODE_COMMANDS[command])


def run(config: AppConfig = default_config) -> None:
    print("="*55)
    print("  MEMORY TREE: gesture choreography")
    print("="*55)
    print(f"  Objects : {config.decoration_count} decorations")
    print(f"  Photos  : {len(config.photo_paths)} source(s)")
    print(f"  Model   : {config.model_path}")
    print(f"  FPS cap : {config.fps_limit}")
    print("  S to enable gestures, ESC to quit")
    print("="*55 + "\n")

    rng      = np.random.default_rng(config.seed)
    scene    = build_scene(config, rng)
    renderer = SceneRenderer(
        config.window_width, config.window_height, config.fov,
        dust_count=config.dust_count, rng=rng,
    )
    photos   = PhotoQueue(config.photo_paths)
    ui       = OpenCVUI(config)
    scene.add_objects(make_decorations(config.decoration_count, rng))

    camera, tracker = open_vision(config)
    frame_time  = 1.0 / config.fps_limit
    prev_mode   = scene.mode
    prev_gesture: HandGesture | None = None
    last_reading = None
    start       = time.monotonic()

    try:
        while True:
            # 1. Capture + track
            frame = None
            if camera is not None:
                captured = camera.read()
                if captured is None:
                    print("[WARN] Camera stopped delivering frames, running without gestures")
                    camera.release()
                    camera = None
                else:
                    frame, timestamp = captured
                    if tracker is not None:
                        scene.submit_frame(tracker.process(frame, timestamp))
            else:
                time.sleep(frame_time)

            # 2. Tick
            reading = scene.tick()
            if reading is not None:
                last_reading = reading

            if reading is not None and reading.gesture != prev_gesture:
                previous = prev_gesture.value if prev_gesture else "-"
                print(f"[GESTURE] {previous} → {reading.gesture.value}")
                prev_gesture = reading.gesture
            if scene.mode != prev_mode:
                print(f"[MODE] {prev_mode.value} → {scene.mode.value}")
                prev_mode = scene.mode

            # 3. Render
            canvas = renderer.render(
                [obj.handle for obj in scene.objects],
                scene.orientation.rotation,
                time.monotonic() - start,
            )
            ui.render(canvas, scene.mode, last_reading, scene.context.gesture_enabled, frame)

            # 4. Commands
            command = ui.poll_command()
            if command == "quit":
                break
            if command is not None:
                dispatch(command, scene, photos, ui)

    finally:
        if camera is not None:
            camera.release()
        if tracker is not None:
            tracker.release()
        ui.close()
        print("\n✓ Application closed cleanly")


if __name__ == "__main__":
    run()
