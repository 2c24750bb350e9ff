"""
Configuration for Kick Tracker.
"""
from pathlib import Path

# ── Device ────────────────────────────────────────────────────────────────────
# CUDA when available; YOLO and the kick-style model both run on it.
def _resolve_device() -> str:
    import torch
    if torch.cuda.is_available():
        print(f"[Config] GPU detected: {torch.cuda.get_device_name(0)} → using CUDA")
        return "cuda"
    return "cpu"

DEVICE = _resolve_device()

# ── Paths ─────────────────────────────────────────────────────────────────────
PROJECT_ROOT = Path(__file__).parent
RESULTS_DIR  = PROJECT_ROOT / "results"
MODELS_DIR   = PROJECT_ROOT / "models"

# ── Perception models ─────────────────────────────────────────────────────────
POSE_MODEL         = "yolov8n-pose.pt"  # Body keypoints (COCO 17 joints)
BALL_MODEL         = "yolov8n.pt"       # Sports-ball detector
SPORTS_BALL_CLASS  = 32                 # COCO class for sports ball
DETECTION_CONF     = 0.25
DETECTION_IMG_SIZE = 960
BALL_MIN_RADIUS_PX = 3
BALL_MAX_RADIUS_PX = 40

# Kick-style classifier (TorchScript, input: window × 3 × joints)
CLASSIFIER_MODEL   = str(MODELS_DIR / "kick_classifier.pt")
CLASSIFIER_LABELS  = ("instep", "outside", "inside")

# ── Game ──────────────────────────────────────────────────────────────────────
MAX_KICKS          = 8
NEW_GAME_DELAY_S   = 5
GOAL_LENGTH_M      = 1.22         # crossbar length used for px → metres
MPS_TO_MPH         = 2.24

# ── Regions (pixels) ──────────────────────────────────────────────────────────
KICK_X_BUFFER       = 50          # gap between subject box and kick region
KICK_Y_BUFFER       = 50
KICK_REGION_WIDTH   = 400
TARGET_X_BUFFER     = 50          # horizontal padding around the goal
OVERLAP_BUFFER      = 50          # kick/target overlap tolerance while chasing
SCORE_HEIGHT_BUFFER = 100         # upward extension of goal + top corner
SUBJECT_BOX_INSET   = 20          # subject box grows by this on every side

# ── Trajectory ────────────────────────────────────────────────────────────────
TRAJECTORY_LENGTH            = 15
TRAJECTORY_MIN_CONFIDENCE    = 0.9
NO_OBSERVATION_FRAME_LIMIT   = 20
MAX_DISTANCE_WITH_TRAJECTORY = 250   # px; larger jumps start a new path
BALL_LOST_FRAMES             = 5     # frames without ball → flight complete
FIT_TOLERANCE_PX             = 30.0  # parabola RMS residual at which confidence hits 0
MIN_PATH_POINTS              = 3

# ── Pose ──────────────────────────────────────────────────────────────────────
POSE_MIN_CONFIDENCE             = 0.6
KEYPOINT_MIN_CONFIDENCE         = 0.1
MAX_POSE_OBSERVATIONS           = 120  # pose ring buffer capacity
CLASSIFIER_WINDOW_SIZE          = 120  # frames fed to the classifier
MAX_IN_FLIGHT_POSE_OBSERVATIONS = 10

# ── Video output ──────────────────────────────────────────────────────────────
OUTPUT_CODEC    = "mp4v"
DEFAULT_SKIP    = 0
BOX_THICKNESS   = 2
FONT_SCALE      = 0.55
FONT_THICKNESS  = 1
