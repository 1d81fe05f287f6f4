"""Domain layer: records, values, vocabularies, chronology and the rule engine."""
