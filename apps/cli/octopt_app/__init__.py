"""Command line front end for octopt."""
