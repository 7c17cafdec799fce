import cv2
import numpy as np

from memory_tree.app.photos import PhotoQueue, collect_photos, load_photo


def _write_image(path, h=100, w=200):
    cv2.imwrite(str(path), np.full((h, w, 3), 128, dtype=np.uint8))
    return path


def test_collect_expands_directories(tmp_path):
    _write_image(tmp_path / "b.png")
    _write_image(tmp_path / "a.jpg")
    (tmp_path / "notes.txt").write_text("not a photo")
    single = tmp_path / "single.png"

    found = collect_photos([tmp_path, single])

    assert [p.name for p in found] == ["a.jpg", "b.png", "single.png"]


def test_load_photo_shrinks_large_images(tmp_path):
    path = _write_image(tmp_path / "big.png", h=400, w=1024)
    image = load_photo(path, max_side=512)

    assert image.shape[:2] == (200, 512)


def test_load_photo_keeps_small_images(tmp_path):
    path = _write_image(tmp_path / "small.png", h=20, w=30)
    assert load_photo(path).shape[:2] == (20, 30)


def test_load_photo_unreadable(tmp_path):
    bad = tmp_path / "broken.jpg"
    bad.write_bytes(b"not an image")
    assert load_photo(bad) is None


def test_queue_wraps_around(tmp_path):
    first = _write_image(tmp_path / "1.png")
    second = _write_image(tmp_path / "2.png")
    queue = PhotoQueue([first, second])

    assert len(queue) == 2
    assert [queue.next_path() for _ in range(3)] == [first, second, first]


def test_empty_queue():
    assert PhotoQueue([]).next_path() is None
