import cv2

from config import DEFAULT_CONFIG

BOX_COLOR = DEFAULT_CONFIG.box_color
BOX_THICKNESS = DEFAULT_CONFIG.box_thickness


def draw_face_boxes(frame, faces, color=BOX_COLOR, thickness=BOX_THICKNESS):
    """Outline every face rectangle on the frame, in place."""
    for x, y, w, h in faces:
        cv2.rectangle(frame, (x, y), (x + w, y + h), color, thickness)
    return frame


def detect_and_draw_faces(frame, detector, color=BOX_COLOR, thickness=BOX_THICKNESS):
    faces = detector.detect(frame)
    draw_face_boxes(frame, faces, color, thickness)
    return frame, faces


# Standalone test
if __name__ == "__main__":
    from face_detection import CascadeDetector

    detector = CascadeDetector.load(DEFAULT_CONFIG.cascade_path)
    cap = cv2.VideoCapture(DEFAULT_CONFIG.camera_index)

    while True:
        ret, frame = cap.read()
        if not ret:
            break

        frame, _ = detect_and_draw_faces(frame, detector)

        cv2.imshow("Face Tracker", frame)
        if cv2.waitKey(1) & 0xFF == ord("q"):
            break

    cap.release()
    cv2.destroyAllWindows()
