# piratedefense

A small tower defense game with pirates. Enemy boats sail along a fixed
channel across a 20 × 20 map. You place crew members beside the channel.
Each crew member has a weapon that fires at the leading boat. You earn
five coins for every boat you sink. You lose a life for every boat that
reaches the end of the channel. The game is over when no lives are left.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

### Graphical game

```
piratedefense [--assets DIR]
```

This opens the home screen. Images and sounds are read from the
directory given by `--assets` (`data` by default). The home screen needs
its images (`HomePirate.png`, `BoutonStart.png`, `BoutonStartPressed.png`,
`Boutonson.png`, `BoutonSonS.png`) and, when audio is available, its
sounds (`musique_pirate.wav`, `clic_start.wav`). If one is missing, the
command prints an error and exits with status 1. Inside the game, a
missing image is drawn as a plain coloured block instead.

Click **Start** to begin. The button in the lower-left corner turns the
music on and off.

During the game:

- To recruit a crew member, drag its card from the bar on the right onto
  an empty cell of the map. A level 1 crew member costs 10 coins, level 2
  costs 20, level 3 costs 30 and level 4 costs 40.
- Press `a` to recruit a level 1 crew member at a random position, or `z`
  to recruit a level 2 crew member the same way.
- Press `p` to pause. The pause screen offers Resume, Restart (a new
  game) and Home (back to the home screen). Pressing `p` again resumes.

The score goes up with the time you survive.

### Terminal game

```
piratedefense-txt
```

The terminal version prints the map as a grid of numbers, with the
enemies, your coins, your lives and your score above it, and updates
once a second. Press `a` or `z` to recruit a crew member and `q` to quit.
Keys are read without waiting for Enter where the terminal supports it
(Unix-like systems).

## Using the engine

The game rules live in plain Python classes that have no display code, so
you can drive them yourself:

```python
from piratedefense.jeu import Jeu

jeu = Jeu()
jeu.pieces = 20
jeu.action_souris(9, 3, "z")   # place a level 2 crew member at (9, 3)
jeu.init_ennemi_jeu()          # send a boat into the channel
jeu.action_automatique(0.5)    # every weapon fires at the leading boat
print(jeu.pieces, jeu.vies, jeu.nb_perso_niveau(2))
```

`Jeu` accepts a `random.Random` instance for repeatable keyboard
recruiting: `Jeu(random.Random(1))`.

The other main classes are these:

- `piratedefense.carte.Carte`, the map grid
- `piratedefense.ennemi.Ennemi`, an enemy boat
- `piratedefense.personnage.Personnage`, a crew member
- `piratedefense.arme.Arme`, a weapon
- `piratedefense.tir.Tir`, a cannonball
- `piratedefense.terminal.WinTxt`, the text window used by the terminal game
- `piratedefense.gui.GameWindow` and `piratedefense.menu.HomeMenu`, the
  graphical game screen and home screen

## What it does not do

The package ships no images, sounds or font. Supply them yourself in the
assets directory. The Restart and Home choices exist only in the
graphical game. Neither front end saves scores or games.