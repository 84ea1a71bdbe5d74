from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from ..errors import InferenceError, ModelLoadError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class OnnxRuntimeBackend:
    """
    Minimal ONNX Runtime backend for single-input/single-output detection models.

    Expects a flat float32 tensor plus its NCHW shape, typically (1, 3, H, W).
    Returns the only output flattened to 1-D float32.

    Session policy is fixed: one intra-op thread, basic graph optimizations,
    CPU execution provider.
    """

    INTRA_OP_NUM_THREADS = 1
    PROVIDERS: Tuple[str, ...] = ("CPUExecutionProvider",)

    def __init__(self, model_path: PathLike):
        try:
            import onnxruntime as ort  # type: ignore
        except Exception as e:  # pragma: no cover
            raise ImportError(
                "onnxruntime is required for the ONNX backend. Install it with `pip install onnxruntime`."
            ) from e

        self.model_path = Path(model_path)
        if not self.model_path.is_file():
            raise ModelLoadError(f"Model not found: {self.model_path}")

        sess_opts = ort.SessionOptions()
        sess_opts.intra_op_num_threads = self.INTRA_OP_NUM_THREADS
        sess_opts.graph_optimization_level = ort.GraphOptimizationLevel.ORT_ENABLE_BASIC

        logger.info("Loading ONNX model from %s", self.model_path)
        try:
            self.session = ort.InferenceSession(
                str(self.model_path), sess_options=sess_opts, providers=list(self.PROVIDERS)
            )
        except Exception as e:
            raise ModelLoadError(f"Could not load model {self.model_path}: {e}") from e

        inputs = self.session.get_inputs()
        outputs = self.session.get_outputs()
        if len(inputs) != 1 or len(outputs) != 1:
            raise ModelLoadError(
                f"Expected a model with exactly one input and one output, got "
                f"{len(inputs)} input(s) and {len(outputs)} output(s): {self.model_path}"
            )

        self.input_name = inputs[0].name
        self.output_name = outputs[0].name
        self.model_input_shape: Sequence[object] = tuple(inputs[0].shape or ())
        logger.debug(
            "Model I/O: %s %s -> %s", self.input_name, list(self.model_input_shape), self.output_name
        )

    @property
    def providers_in_use(self) -> Sequence[str]:
        return tuple(self.session.get_providers())

    @property
    def input_size(self) -> Optional[Tuple[int, int]]:
        """
        (width, height) declared by the model, or None when the spatial dims are dynamic.
        """

        shape = self.model_input_shape
        if len(shape) != 4:
            return None
        h, w = shape[2], shape[3]
        if isinstance(h, int) and isinstance(w, int) and h > 0 and w > 0:
            return w, h
        return None

    def _check_shape(self, input_shape: Sequence[int]) -> None:
        if len(self.model_input_shape) not in (0, len(input_shape)):
            raise InferenceError(
                f"Input rank mismatch: model expects {list(self.model_input_shape)}, got {list(input_shape)}"
            )
        for declared, given in zip(self.model_input_shape, input_shape):
            # Symbolic/dynamic dims come back as str or None.
            if isinstance(declared, int) and declared > 0 and declared != given:
                raise InferenceError(
                    f"Input shape mismatch: model expects {list(self.model_input_shape)}, got {list(input_shape)}"
                )

    def run(self, tensor: np.ndarray, input_shape: Sequence[int]) -> np.ndarray:
        flat = np.asarray(tensor, dtype=np.float32).reshape(-1)
        expected = int(np.prod(input_shape))
        if flat.size != expected:
            raise InferenceError(
                f"Tensor has {flat.size} values but input shape {list(input_shape)} needs {expected}"
            )
        self._check_shape(input_shape)

        blob = flat.reshape(tuple(int(d) for d in input_shape))
        try:
            outputs = self.session.run([self.output_name], {self.input_name: blob})
        except Exception as e:
            raise InferenceError(f"Inference failed: {e}") from e

        out = np.asarray(outputs[0], dtype=np.float32).reshape(-1)
        logger.debug("Model output: %d values", out.size)
        return out

    def infer(self, prep) -> np.ndarray:
        """Run on a `PreprocessResult`; the callable handed to `DetectionPipeline`."""
        return self.run(prep.tensor, prep.input_shape)
