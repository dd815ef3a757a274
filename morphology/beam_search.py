"""Beam search over competing morphological analyses.

Each round every active analysis proposes its successors.  The pooled
successors are ranked by score and the best of them, up to the beam
width, become the next round's active analyses.  An analysis with no
successors is complete; it leaves the beam and the beam narrows by one
instead of taking in another successor.
"""

import logging


class BeamSearch:

    def __init__(self, analysis, width, logger=None):
        if width < 1:
            raise ValueError(f"Beam width must be positive, not {width}")
        self.logger = logger or logging.getLogger(__name__)
        self.beam_width = width
        self.width = width
        self.active = [analysis]
        self.completed = []
        self.rounds = 0

    @property
    def done(self):
        return not self.active

    def step(self):
        """Run one round of the search."""
        successors = []
        for analysis in self.active:
            following = analysis.next_iteration()
            if following:
                successors.extend(following)
            else:
                self.completed.append(analysis)
                self.width -= 1
        # sorted() is stable, so equal scores keep the order they were made in.
        successors.sort(key=lambda a: a.score, reverse=True)
        seen = set()
        active = []
        for analysis in successors:
            if len(active) >= self.width:
                break
            key = analysis.key()
            if key in seen:
                continue
            seen.add(key)
            active.append(analysis)
        self.active = active
        self.rounds += 1
        self.logger.info(
            "Round %d: %d successors, %d active, %d complete",
            self.rounds, len(successors), len(self.active), len(self.completed))
        return self.active

    def run(self, max_rounds=None):
        """Step until the search is done or *max_rounds* have run."""
        while not self.done:
            if max_rounds is not None and self.rounds >= max_rounds:
                self.logger.info("Stopping after %d rounds", self.rounds)
                break
            self.step()
        return self

    def __iter__(self):
        """Run the search, yielding the active analyses after each round."""
        while not self.done:
            yield self.step()

    def results(self):
        """Completed and active analyses, best score first."""
        return sorted(self.completed + self.active,
                      key=lambda a: a.score, reverse=True)
