from lispy.evaluation.evaluator import evaluate, evaluate_sexpr, evaluate_top_level
