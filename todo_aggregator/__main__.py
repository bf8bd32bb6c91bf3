# todo_aggregator/__main__.py
from todo_aggregator.cli import main

main()
