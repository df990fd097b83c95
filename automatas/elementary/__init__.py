"""One-dimensional elementary cellular automaton (rule 110)."""