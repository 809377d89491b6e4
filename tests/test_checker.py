import threading
import unittest

from services.checker import Checker


class CheckerTestCase(unittest.TestCase):
    def setUp(self):
        self.checker = Checker()
        self.checker.train("spelling")

    def test_deletion(self):
        self.assertEqual(self.checker.correct("speling"), "spelling")

    def test_transposition(self):
        self.assertEqual(self.checker.correct("spellign"), "spelling")

    def test_alteration(self):
        self.assertEqual(self.checker.correct("spellang"), "spelling")
        self.assertEqual(self.checker.correct("spelleng"), "spelling")
        self.assertEqual(self.checker.correct("spulling"), "spelling")

    def test_insertion(self):
        self.assertEqual(self.checker.correct("spelliing"), "spelling")
        self.assertEqual(self.checker.correct("speelling"), "spelling")


class TrainingTestCase(unittest.TestCase):
    def test_counts_and_probability(self):
        checker = Checker()
        checker.train("the the the")
        self.assertEqual(checker.count("the"), 3)
        self.assertEqual(checker.probability("the"), 1.0)

    def test_training_accumulates(self):
        checker = Checker()
        checker.train("apple pie")
        checker.train("apple tart")
        self.assertEqual(checker.count("apple"), 2)
        self.assertEqual(checker.stats(), {"words": 3, "total": 4})

    def test_non_alphabetic_text_is_a_noop(self):
        checker = Checker()
        checker.train("")
        checker.train("123 --- !!! 42")
        self.assertEqual(checker.stats(), {"words": 0, "total": 0})
        self.assertEqual(checker.probability("anything"), 0.0)

    def test_load_counts(self):
        checker = Checker()
        checker.load_counts({"The": 5, "cat": 2, "dog": 0})
        self.assertEqual(checker.count("the"), 5)
        self.assertFalse(checker.contains("dog"))
        self.assertEqual(checker.stats()["total"], 7)
        with self.assertRaises(ValueError):
            checker.load_counts([("cat", -1)])
        self.assertEqual(checker.count("cat"), 2)

    def test_empty_alphabet_rejected(self):
        with self.assertRaises(ValueError):
            Checker(alphabet="")


class CorrectionTestCase(unittest.TestCase):
    corpus = (
        "Poetry is the record of the best and happiest moments. "
        "We read poetry because we are members of the human race. "
        "poetry poetry poetry, and the rest is prose."
    )

    def setUp(self):
        self.checker = Checker()
        self.checker.train(self.corpus)

    def test_two_edits(self):
        self.assertEqual(self.checker.correct("peotryy"), "poetry")

    def test_known_words_unchanged(self):
        for word, _ in self.checker.most_common(50):
            self.assertEqual(self.checker.correct(word), word)
            self.assertEqual(self.checker.correct(self.checker.correct(word)), word)

    def test_no_neighbour(self):
        self.assertEqual(self.checker.correct("zzzzz"), "zzzzz")

    def test_case_normalization(self):
        self.assertEqual(self.checker.correct("THE"), self.checker.correct("the"))
        self.assertEqual(self.checker.correct("Poetyr"), "poetry")

    def test_empty_word(self):
        self.assertEqual(self.checker.correct(""), "")

    def test_untrained_returns_input(self):
        self.assertEqual(Checker().correct("speling"), "speling")

    def test_closer_edit_beats_frequency(self):
        checker = Checker()
        checker.train("cart " + "cat " * 50)
        # "carts" is one edit from "cart" and two from "cat"
        self.assertEqual(checker.correct("carts"), "cart")

    def test_tie_break_is_lexicographic(self):
        for _ in range(5):
            checker = Checker()
            checker.train("bat cat")
            self.assertEqual(checker.correct("xat"), "bat")

    def test_tie_break_ignores_training_order(self):
        checker = Checker()
        checker.train("cat bat")
        self.assertEqual(checker.correct("xat"), "bat")

    def test_custom_alphabet(self):
        checker = Checker(alphabet="abcdefghijklmnopqrstuvwxyzäöüß")
        checker.train("Grüße aus Köln")
        self.assertEqual(checker.count("grüße"), 1)
        self.assertEqual(checker.correct("Gruße"), "grüße")

    def test_independent_checkers(self):
        other = Checker()
        self.assertTrue(self.checker.contains("poetry"))
        self.assertFalse(other.contains("poetry"))


class ConcurrencyTestCase(unittest.TestCase):
    def test_parallel_training_keeps_totals(self):
        checker = Checker()
        threads = [threading.Thread(target=checker.train, args=("alpha beta " * 200,)) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(checker.count("alpha"), 1600)
        self.assertEqual(checker.stats()["total"], 3200)

    def test_correct_waits_for_training(self):
        checker = Checker()
        checker.train("spelling")
        done = threading.Event()
        results = []

        def read():
            results.append(checker.correct("speling"))
            done.set()

        with checker._lock.write():
            thread = threading.Thread(target=read)
            thread.start()
            self.assertFalse(done.wait(0.2))
        self.assertTrue(done.wait(5))
        thread.join(5)
        self.assertEqual(results, ["spelling"])

    def test_train_waits_for_readers(self):
        checker = Checker()
        done = threading.Event()

        def write():
            checker.train("spelling")
            done.set()

        with checker._lock.read():
            thread = threading.Thread(target=write)
            thread.start()
            self.assertFalse(done.wait(0.2))
        self.assertTrue(done.wait(5))
        thread.join(5)
        self.assertEqual(checker.count("spelling"), 1)

    def test_readers_during_training(self):
        checker = Checker()
        checker.train("spelling")
        results = []

        def read():
            for _ in range(20):
                results.append(checker.correct("speling"))

        threads = [threading.Thread(target=read) for _ in range(4)]
        threads.append(threading.Thread(target=checker.train, args=("words " * 1000,)))
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(set(results), {"spelling"})
        self.assertEqual(checker.count("words"), 1000)


if __name__ == "__main__":
    unittest.main()
