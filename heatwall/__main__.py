"""Allow `python -m heatwall`."""

from heatwall.heatwall import main

main()
