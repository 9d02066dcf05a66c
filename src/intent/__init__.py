"""Intent extraction.

The intent layer turns an English report request into a strict `Intent` (object, fields, condition
predicates), either from a language-model reply or from deterministic keyword rules. Queries are
always assembled from an `Intent` downstream, never taken from the model verbatim.
"""
