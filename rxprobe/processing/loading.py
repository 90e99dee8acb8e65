"""Loading recorded submissions from YAML."""

from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from rxprobe.processing.data_models import FormSubmission


def load_submissions(filepath: str | Path) -> list[FormSubmission]:
    """Read form submissions from a YAML file.

    The file holds either a list of submissions or a mapping with a
    ``submissions`` list.

    Args:
        filepath: YAML file to read

    Returns:
        Submissions in file order

    Raises:
        ValueError: If the file does not have the expected structure
    """
    with open(filepath, encoding="utf-8") as f:
        document = yaml.safe_load(f)

    if isinstance(document, dict):
        document = document.get("submissions")
    if document is None:
        return []
    if not isinstance(document, list):
        raise ValueError(f"{filepath}: expected a list of submissions")

    submissions = []
    for index, entry in enumerate(document, start=1):
        if not isinstance(entry, dict):
            raise ValueError(f"{filepath}: submission {index} is not a mapping")
        try:
            submissions.append(FormSubmission.model_validate(entry))
        except ValidationError as e:
            raise ValueError(f"{filepath}: submission {index} is invalid: {e}") from e

    logger.debug(f"Loaded {len(submissions)} submissions from {filepath}")
    return submissions
