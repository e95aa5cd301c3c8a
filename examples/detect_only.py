import argparse
import logging
import sys
import os

# Ensure project root is on sys.path when running this file directly
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from shapescan.config import ShapescanConfig
from shapescan.geometry.visualize import draw_shapes
from shapescan.pipeline.shape_extractor import ShapeExtractor


def main():
    parser = argparse.ArgumentParser(description="Run the shape detector and print the result JSON.")
    parser.add_argument("--image", required=True, help="Path to input image")
    parser.add_argument("--out", default=None, help="Optional path to save result JSON")
    parser.add_argument("--overlay", default=None, help="Optional path to save a bounding-box overlay")
    parser.add_argument("--summary", action="store_true", help="Print a readable summary instead of JSON")
    args = parser.parse_args()

    config = ShapescanConfig()
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    extractor = ShapeExtractor(config)
    result = extractor.detect_file(args.image)

    if args.overlay:
        print("Saved:", draw_shapes(args.image, result, args.overlay))

    if args.summary:
        print(extractor.summarize(result))
        return

    text = extractor.to_json(result)
    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(text)
        print(f"Wrote result to {args.out}")
    else:
        print(text)


if __name__ == "__main__":
    main()
