"""Turn a ChordClassification into the text label shown to the user."""
from chordfinder.chord_types import ChordType, chord_type_name
from chordfinder.constants import DEFAULT_CHORD_NAME, NO_ROOT, _PC_TO_NOTE


def root_name(root, pitch_class_names=_PC_TO_NOTE) -> str:
    if root is None:
        return NO_ROOT
    return pitch_class_names[root]


def render(classification, default_chord_name: str = DEFAULT_CHORD_NAME,
           pitch_class_names=_PC_TO_NOTE) -> str:
    """
    Label for a classification, e.g. "C major" or "Ab dominant 7th".

    An empty set renders as ``default_chord_name`` unchanged. A classification
    without a root reads "no root ..."; an undefined quality reads "unknown".
    """
    if classification.type == ChordType.DEFAULT:
        return default_chord_name
    return (f"{root_name(classification.root, pitch_class_names)} "
            f"{chord_type_name(classification.type)}")
