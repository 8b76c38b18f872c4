"""
Application layer.

The application layer orchestrates domain objects. It contains the use
cases available to external actors, the repository protocols they depend
on, and the unit of work port that bounds each operation's transaction.
"""
