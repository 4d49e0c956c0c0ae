from bitevo.genes.bit_vector import BitVector, Gene, ScoreFunction

__all__ = ["BitVector", "Gene", "ScoreFunction"]
