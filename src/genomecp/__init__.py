"""genomecp: genome browser data aggregation over public bioinformatics APIs."""

__version__ = "0.1.0"
