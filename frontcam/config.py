from dataclasses import dataclass, field
from pathlib import Path
import yaml


@dataclass
class CameraConfig:
    device: int = 0
    width: int = 640
    height: int = 360


@dataclass
class DetectionConfig:
    scale_factor: float = 1.2
    min_neighbors: int = 3
    min_face_size: tuple = (30, 30)


@dataclass
class OverlayConfig:
    box_color: tuple = (0, 0, 255)  # BGR red
    box_thickness: int = 2
    show_label: bool = False
    label_text: str = "human face"


@dataclass
class WindowConfig:
    title: str = "Front Camera Face Detection"
    poll_interval_ms: int = 10


@dataclass
class Config:
    camera: CameraConfig = field(default_factory=CameraConfig)
    detection: DetectionConfig = field(default_factory=DetectionConfig)
    overlay: OverlayConfig = field(default_factory=OverlayConfig)
    window: WindowConfig = field(default_factory=WindowConfig)
    log_level: str = "INFO"


def load_config(path: str = "config.yaml") -> Config:
    """Load config from YAML file, falling back to defaults for missing keys."""
    config = Config()
    config_path = Path(path)

    if not config_path.exists():
        return config

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if "camera" in data:
        c = data["camera"]
        config.camera = CameraConfig(
            device=c.get("device", config.camera.device),
            width=c.get("width", config.camera.width),
            height=c.get("height", config.camera.height),
        )

    if "detection" in data:
        d = data["detection"]
        config.detection = DetectionConfig(
            scale_factor=d.get("scale_factor", config.detection.scale_factor),
            min_neighbors=d.get("min_neighbors", config.detection.min_neighbors),
            min_face_size=tuple(d.get("min_face_size", list(config.detection.min_face_size))),
        )

    if "overlay" in data:
        o = data["overlay"]
        config.overlay = OverlayConfig(
            box_color=tuple(o.get("box_color", list(config.overlay.box_color))),
            box_thickness=o.get("box_thickness", config.overlay.box_thickness),
            show_label=o.get("show_label", config.overlay.show_label),
            label_text=o.get("label_text", config.overlay.label_text),
        )

    if "window" in data:
        w = data["window"]
        config.window = WindowConfig(
            title=w.get("title", config.window.title),
            poll_interval_ms=w.get("poll_interval_ms", config.window.poll_interval_ms),
        )

    if "logging" in data:
        config.log_level = data["logging"].get("level", config.log_level)

    return config
