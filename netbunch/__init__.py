"""Complex network analysis: clustering, components, betweenness and configuration-model sampling."""

__version__ = "0.1.0"