"""features subpackage: conventional feature names and value vocabularies.

Re-exports the public API:
- Feature, InternalFeature, LexicalFeature: StrEnums of agreed feature names
- inflectional_features: inflected-form feature names for a category
- DiscourseFunction, ClauseStatus, NumberAgreement, Tense, Gender, Person,
  Form, InterrogativeType, Inflection: value vocabularies
"""

from nlg_framework.features.names import (
    Feature,
    InternalFeature,
    LexicalFeature,
    inflectional_features,
)
from nlg_framework.features.values import (
    ClauseStatus,
    DiscourseFunction,
    Form,
    Gender,
    Inflection,
    InterrogativeType,
    NumberAgreement,
    Person,
    Tense,
)

__all__ = [
    "ClauseStatus",
    "DiscourseFunction",
    "Feature",
    "Form",
    "Gender",
    "Inflection",
    "InternalFeature",
    "InterrogativeType",
    "LexicalFeature",
    "NumberAgreement",
    "Person",
    "Tense",
    "inflectional_features",
]
