"""Pokémon TCG one-kill chance checker."""
