from cinder.evaluation.evaluator import evaluate
from cinder.evaluation.apply import apply

__all__ = ("evaluate", "apply")
