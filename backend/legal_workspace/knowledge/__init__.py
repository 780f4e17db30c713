from .catalog import ANALYSIS_CARDS, CASE_CATEGORIES, OFFENCE_TYPES, STATUTES

__all__ = ["ANALYSIS_CARDS", "CASE_CATEGORIES", "OFFENCE_TYPES", "STATUTES"]
