class InvalidInput(ValueError):
    """
    Raised when a pixel buffer (or the image file it comes from) cannot be
    processed: non-positive dimensions, a pixel count that does not match
    width * height, or a file OpenCV cannot decode.
    """
