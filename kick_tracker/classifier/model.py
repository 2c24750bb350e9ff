"""
TorchScript kick-style model.

Expects a scripted module taking a (1, window, 3, joints) float tensor and
returning one logit per label. The model is loaded lazily on first use.
"""
from __future__ import annotations
from pathlib import Path
from typing import Optional, Sequence, Tuple
import numpy as np

from ..errors import ClassifierUnavailableError
import config


class TorchKickClassifier:

    def __init__(
        self,
        model_path: str = config.CLASSIFIER_MODEL,
        labels: Sequence[str] = config.CLASSIFIER_LABELS,
        device: str = config.DEVICE,
    ):
        self.model_path = Path(model_path)
        self.labels = tuple(labels)
        self.device = device
        self._module = None

    def _load(self):
        if self._module is None:
            if not self.model_path.exists():
                raise ClassifierUnavailableError("weights not found", str(self.model_path))
            import torch
            try:
                module = torch.jit.load(str(self.model_path), map_location=self.device)
            except RuntimeError as exc:
                raise ClassifierUnavailableError(str(exc), str(self.model_path)) from exc
            module.eval()
            self._module = module
        return self._module

    def predict(self, window: np.ndarray) -> Tuple[str, float]:
        import torch
        module = self._load()
        x = torch.from_numpy(np.ascontiguousarray(window, dtype=np.float32))
        with torch.no_grad():
            logits = module(x.unsqueeze(0).to(self.device))
        probs = torch.softmax(logits.reshape(-1), dim=0).cpu().numpy()
        if probs.shape[0] != len(self.labels):
            raise ClassifierUnavailableError(
                f"model returned {probs.shape[0]} scores for {len(self.labels)} labels",
                str(self.model_path),
            )
        best = int(np.argmax(probs))
        return self.labels[best], float(probs[best])


def load_classifier(model_path: Optional[str] = None) -> Optional[TorchKickClassifier]:
    """Classifier for ``model_path`` if the weights exist, else None."""
    path = Path(model_path or config.CLASSIFIER_MODEL)
    if not path.exists():
        return None
    return TorchKickClassifier(model_path=str(path))
