"""Flask front end for the spell corrector: JSON /correct endpoint plus a one-page UI."""
