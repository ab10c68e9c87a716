from maze_game.main import cli

cli()
