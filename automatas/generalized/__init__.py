"""Multi-colour tape for generalised Langton's ants."""