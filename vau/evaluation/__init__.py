from vau.evaluation.evaluator import evaluate
from vau.evaluation.apply import apply
