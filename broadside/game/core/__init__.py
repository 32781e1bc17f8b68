"""Board, fleet and player bookkeeping."""
