"""
CLI entry point for the kick tracker.

    python main.py --input kicks.mp4 --scene results/scene.json
    python main.py --input kicks.mp4 --scene results/scene.json \\
        --goal 600,0,200,300 --corner 600,0,60,60 --crossbar 200 --save-scene
"""
import argparse
import logging
import sys
from pathlib import Path

from kick_tracker import (
    GameSettings, KickTrackerError, Pipeline, Region, SceneCalibration,
)
import config


def _region_arg(value: str) -> Region:
    try:
        x, y, w, h = (float(v) for v in value.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected x,y,w,h, got {value!r}")
    return Region(x, y, w, h)


def parse_args():
    parser = argparse.ArgumentParser(
        description="Kick-at-goal scoring from video",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--input", "-i", required=True, help="Path to input video file")
    parser.add_argument("--scene", required=True, help="Scene calibration JSON (goal geometry)")
    parser.add_argument("--output", "-o", default=str(config.RESULTS_DIR),
                        help="Output directory for the annotated video")
    parser.add_argument("--name", "-n", default=None,
                        help="Base name for output files (default: input filename)")
    parser.add_argument("--skip", "-s", type=int, default=config.DEFAULT_SKIP,
                        help="Frames to skip between processed frames")
    parser.add_argument("--max-frames", "-m", type=int, default=None,
                        help="Maximum frames to process (default: all)")
    parser.add_argument("--max-kicks", type=int, default=config.MAX_KICKS,
                        help="Kicks per session")
    parser.add_argument("--classifier", default=config.CLASSIFIER_MODEL,
                        help="TorchScript kick-style model (missing file = undetermined style)")
    parser.add_argument("--video", action="store_true", help="Save annotated output video")
    parser.add_argument("--quiet", "-q", action="store_true", help="Suppress progress bar")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    # Scene overrides
    parser.add_argument("--goal", type=_region_arg, default=None, help="Goal region x,y,w,h")
    parser.add_argument("--corner", type=_region_arg, default=None,
                        help="Top-corner region x,y,w,h")
    parser.add_argument("--crossbar", type=float, default=None,
                        help="Crossbar length in pixels")
    parser.add_argument("--save-scene", action="store_true",
                        help="Write the resulting scene back to --scene")
    return parser.parse_args()


def build_scene(args) -> SceneCalibration:
    scene_path = Path(args.scene)
    scene = SceneCalibration.load(scene_path)
    if scene is None and not (args.goal and args.corner and args.crossbar):
        raise KickTrackerError(f"No usable scene at {scene_path}; "
                               "pass --goal, --corner and --crossbar")
    if scene is None:
        scene = SceneCalibration(args.goal, args.corner, args.crossbar)
    else:
        if args.goal:
            scene.goal_region = args.goal
        if args.corner:
            scene.top_corner_region = args.corner
        if args.crossbar:
            scene.crossbar_length_px = args.crossbar
    if args.save_scene:
        scene.save(scene_path)
    return scene


def print_session(title: str, stats: dict) -> None:
    print(f"\n{title}")
    print(f"  Kicks:          {stats['kick_count']}/{stats['max_kicks']}")
    print(f"  Total score:    {stats['total_score']}")
    print(f"  Scores:         {stats['scores']}")
    print(f"  Top speed:      {stats['top_speed_mph']:.2f} mph")
    print(f"  Avg speed:      {stats['avg_speed_mph']:.2f} mph")
    print(f"  Avg angle:      {stats['avg_release_angle_deg']:.2f} deg")
    print(f"  Styles:         {stats['kick_styles']}")


def main():
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Input file not found: {args.input}")
        sys.exit(1)

    try:
        scene = build_scene(args)
        settings = GameSettings(max_kicks=args.max_kicks)
        pipeline = Pipeline(
            scene,
            settings=settings,
            classifier_path=args.classifier,
            output_dir=args.output,
            frame_skip=args.skip,
            save_video=args.video,
            show_progress=not args.quiet,
        )
        print(f"Processing: {args.input}")
        result = pipeline.process(str(input_path), max_frames=args.max_frames,
                                  output_name=args.name)
    except KeyboardInterrupt:
        print("\nProcessing interrupted by user.")
        sys.exit(0)
    except KickTrackerError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print("\n--- Processing Complete ---")
    print(f"Frames processed: {result.frames_processed}")
    for i, stats in enumerate(result.sessions, start=1):
        print_session(f"Session {i}", stats)
    if result.current is not None:
        print_session("Unfinished session", result.current)
    if not result.sessions and result.current is None:
        print("No kicks recorded.")


if __name__ == "__main__":
    main()
