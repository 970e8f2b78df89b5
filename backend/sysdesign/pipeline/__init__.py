from sysdesign.pipeline.synthesis import SynthesisResult, SynthesisService, apply_text

__all__ = ["SynthesisResult", "SynthesisService", "apply_text"]
