"""
Question Catalogue Tests
"""

from app.survey.catalogue import QUESTION_CATALOGUE, build_catalogue
from app.survey.weights import WEIGHT_TABLE


class TestQuestionCatalogue:

    def test_sets_match_weight_table(self):
        for w in WEIGHT_TABLE:
            assert len(QUESTION_CATALOGUE[w.set_number]) == w.length

    def test_every_question_bilingual(self):
        for questions in QUESTION_CATALOGUE.values():
            for english, hindi in questions:
                assert english.strip()
                assert hindi.strip()

    def test_numbering_runs_1_to_70(self):
        catalogue = build_catalogue()
        numbers = [q["number"] for s in catalogue["sets"] for q in s["questions"]]

        assert numbers == list(range(1, 71))

    def test_only_set1_required(self):
        catalogue = build_catalogue()

        assert [s["required"] for s in catalogue["sets"]] == [True, False, False]
        assert [s["request_field"] for s in catalogue["sets"]] == [
            "scoresSet1", "scoresSet2", "scoresSet3",
        ]

    def test_weights_attached(self):
        catalogue = build_catalogue()
        set1 = catalogue["sets"][0]["questions"]

        assert set1[2]["weight"] == 3
        assert set1[2]["tier"] == "high"
        assert set1[16]["inverted"] is True
        assert sum(q["inverted"] for s in catalogue["sets"] for q in s["questions"]) == 1
        assert catalogue["scale"] == {"min": 1, "max": 5}
