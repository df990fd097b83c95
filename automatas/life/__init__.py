"""Game of Life cell following rule 23/3."""