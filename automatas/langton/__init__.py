"""Classic Langton's ant on a bounded tape, with an interactive command."""