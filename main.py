import argparse
import logging

from pipeline.controller import PipelineController
from visualization.surface import ImageSurface
from visualization.text_surface import TextSurface
from visualization.save_outputs import save_all_outputs
from utils.image_io import list_images, load_image, image_name, ensure_output_dir
from errors import InvalidInput

from config import (
    SELECTED_IMAGE_PATTERN,
    OUTPUT_FOLDER,
    PIPELINE_VARIANT,
    VARIANTS,
    CANVAS_SIZE,
    RESOLUTION,
    DEFAULT_SENSITIVITY,
)


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Turn images into 9x9 connect-the-dots sketches")
    p.add_argument("images", nargs="*", help=f"Image files (default: {SELECTED_IMAGE_PATTERN})")
    p.add_argument("--sensitivity", type=int, default=DEFAULT_SENSITIVITY)
    p.add_argument("--sweep", type=int, nargs="+", default=[],
                   help="Further sensitivities to render after the first")
    p.add_argument("--variant", choices=sorted(VARIANTS), default=PIPELINE_VARIANT)
    p.add_argument("--size", type=int, default=CANVAS_SIZE, help="Canvas side in pixels")
    p.add_argument("--output", default=OUTPUT_FOLDER)
    p.add_argument("--text", action="store_true", help="Also print a terminal preview")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return p


def process_image(image, image_id: str, args):
    """
    Runs the complete pipeline for one image:
      1. Image ready event at the starting sensitivity
      2. One sensitivity change event per sweep value
      3. Save each render (and optionally print a text preview)
    """

    print(f"\n=== Processing image with name: {image_id} ===")

    surface = ImageSurface(args.size, args.size)
    controller = PipelineController(surface, args.size, args.size, args.variant, args.sensitivity)

    preview = None
    if args.text:
        # terminal cells are about twice as tall as they are wide
        preview = PipelineController(TextSurface(), RESOLUTION * 6, RESOLUTION * 3,
                                     args.variant, args.sensitivity, dot_radius=0)

    try:
        state = controller.on_image_ready(image)
        if preview is not None:
            preview.on_image_ready(image)
        _report(image_id, state, surface, preview, args)

        for value in args.sweep:
            state = controller.on_sensitivity_changed(value)
            if preview is not None:
                preview.on_sensitivity_changed(value)
            _report(image_id, state, surface, preview, args)

    except InvalidInput as exc:
        print(f"[WARN] {image_id}: {exc}. Skipping.")
        return

    print(f"[OK] Finished {image_id}")


def _report(image_id, state, surface, preview, args):
    render_set = state.last_render
    path = save_all_outputs(args.output, image_id, state.sensitivity, surface)
    print(
        f"  s={state.sensitivity}: {len(render_set.points)} edge points, "
        f"{len(render_set.drawn_strokes)} strokes -> {path}"
    )
    if preview is not None:
        print(preview.surface.to_text())


def main(argv=None):
    """
    Main entry point:
      - Loads images
      - Processes each one independently
      - Saves output files
    """
    args = build_argparser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    ensure_output_dir(args.output)

    paths = args.images or list_images(SELECTED_IMAGE_PATTERN)
    if not paths:
        print(f"[ERROR] No images matched pattern: {SELECTED_IMAGE_PATTERN}")
        return

    for path in paths:
        image = load_image(path)
        if image is None:
            print(f"[ERROR] Could not decode {path}")
            continue
        process_image(image, image_name(path), args)

    print("\n=== All images processed ===")


if __name__ == "__main__":
    main()
