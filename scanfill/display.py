import cv2

ESCAPE = 27


def show_canvas(canvas, title='scanfill', delay_ms=16):
    """
    Shows CANVAS in a window until Escape is pressed or the window is
    closed. Only reads the buffer.
    """
    bgr = canvas.to_rgb()[..., ::-1].copy()
    cv2.namedWindow(title, cv2.WINDOW_AUTOSIZE)
    try:
        while True:
            cv2.imshow(title, bgr)
            key = cv2.waitKey(delay_ms) & 0xFF
            if key == ESCAPE:
                break
            if cv2.getWindowProperty(title, cv2.WND_PROP_VISIBLE) < 1:
                break
    finally:
        cv2.destroyAllWindows()
