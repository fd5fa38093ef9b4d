import cv2

from config import DEFAULT_CONFIG
from face_detection import CascadeDetector, DetectorLoadError
from logger_setup import configure_logging, logger
from snapshot import SnapshotWriter


def build_gui(detector, snapshot_writer, config):
    # Imported here so the window toolkit only loads once the detector is up
    from gui_interface import FaceDetectionGUI

    return FaceDetectionGUI(detector, snapshot_writer, config)


def main(config=DEFAULT_CONFIG):
    configure_logging(config.log_level)
    logger.info("OpenCV version: %s", cv2.__version__)

    # Detector first: without it there is nothing to show, so no window at all
    try:
        detector = CascadeDetector.load(
            config.cascade_path,
            scale_factor=config.scale_factor,
            min_neighbors=config.min_neighbors,
        )
    except DetectorLoadError as e:
        logger.error("%s", e)
        return 1

    gui = build_gui(detector, SnapshotWriter(config.snapshot_dir), config)
    try:
        gui.run()
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt detected. Exiting...")
    finally:
        if gui.controller.camera_active:
            gui.controller.state.deactivate()
        logger.info("Shutdown complete.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
