"""Sample flashcard sets for demos and manual testing.

Loads a few sets from an embedded JSON file so the app has something to
browse right after startup. Use COLLECTION_SEED=sample to enable.
"""

import json
from importlib import resources
from pathlib import Path

from src.domain.entities.flashcard import Flashcard
from src.domain.entities.flashcard_set import FlashcardSet


def load_sample_sets() -> list[FlashcardSet]:
    """Build fresh sample sets from embedded JSON data.

    Every call creates new entities with new ids. Uses importlib.resources
    for package data, falling back to the file path in a source checkout.
    """
    try:
        data_path = resources.files("src.adapters.data").joinpath("sample_sets.json")
        with data_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (ModuleNotFoundError, FileNotFoundError, TypeError):
        file_path = Path(__file__).parent / "data" / "sample_sets.json"
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f)

    sets = []
    for set_data in data["sets"]:
        flashcard_set = FlashcardSet.create(set_data["name"])
        for card_data in set_data["cards"]:
            flashcard_set.append_card(
                Flashcard.create(term=card_data["term"], definition=card_data["definition"])
            )
        sets.append(flashcard_set)
    return sets
