"""
Score Aggregator for the Linked Toolbox.
"""

from typing import Dict

from algorithms.errors import reject


def top_scorer(scores: Dict[str, int]) -> str:
    """
    Return the name with the highest score.

    Ties go to the name that sorts first lexicographically, whatever the
    mapping's iteration order.

    Example:
        {"Lewis": 20, "Yuki": 23, "Kimi": 16} -> "Yuki"

    Args:
        scores: Player name -> score

    Returns:
        Name of the top scorer

    Raises:
        InvalidArgumentError: If scores is None or empty
    """
    if scores is None or len(scores) == 0:
        raise reject("top_scorer", "Scores cannot be None or empty.")

    best_name = None
    best_score = None
    for name, score in scores.items():
        if best_name is None or score > best_score:
            best_name, best_score = name, score
        elif score == best_score and name < best_name:
            best_name = name

    return best_name
