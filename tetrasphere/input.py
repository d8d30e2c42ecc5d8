import pygame


class InputState:
    """
    Collects raw keyboard state into logical actions.

    - subdivision: +1 on UP, -1 on DOWN (edge-triggered, one step per press)
    - quit: ESC
    """

    def __init__(self):
        self.actions = {
            "subdivision": 0,
            "quit": False,
        }

        # previous key states for edge detection
        self._prev_up = False
        self._prev_down = False

    def update(self, keys=None):
        """
        Read the keyboard and refresh the action table.

        :param keys: Key state indexable by pygame key constants; defaults to
            pygame.key.get_pressed()
        :return: The actions dict
        """
        if keys is None:
            keys = pygame.key.get_pressed()

        up_now = bool(keys[pygame.K_UP])
        down_now = bool(keys[pygame.K_DOWN])

        step = 0
        if up_now and not self._prev_up:
            step += 1
        if down_now and not self._prev_down:
            step -= 1
        self.actions["subdivision"] = step

        self._prev_up = up_now
        self._prev_down = down_now

        self.actions["quit"] = bool(keys[pygame.K_ESCAPE])

        return self.actions
