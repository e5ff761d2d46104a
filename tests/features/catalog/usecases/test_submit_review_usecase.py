"""Tests for the SubmitReviewUseCase."""

from uuid import uuid4

import pytest

from app.core.errors import NotFoundError, PersistenceError, ValidationError
from app.features.catalog import kinds
from app.features.catalog.dtos import CreateReviewRequest, Sentiment
from app.features.catalog.usecases import SubmitReviewUseCaseImpl
from tests.utils.fakes import FakeSentimentClassifier, InMemoryEntityRepository


@pytest.fixture
def isp(isp_repository: InMemoryEntityRepository):
    return isp_repository.seed(name="ACME", speed=100, cost=50, coverage_area="NYC")


def make_use_case(repository, classifier) -> SubmitReviewUseCaseImpl:
    return SubmitReviewUseCaseImpl(
        repository=repository, sentiment_classifier=classifier, kind=kinds.ISP
    )


class TestSubmitReviewUseCase:
    """Test suite for the SubmitReviewUseCase."""

    async def test_appends_exactly_one_review(self, isp_repository, isp):
        classifier = FakeSentimentClassifier(Sentiment.POSITIVE)
        use_case = make_use_case(isp_repository, classifier)

        response = await use_case.execute(
            str(isp.id), CreateReviewRequest(user="Bob", feedback="Great service!")
        )

        assert response.message == "Review added successfully"
        assert response.sentiment == Sentiment.POSITIVE
        stored = await isp_repository.find_by_id(isp.id)
        assert stored is not None
        assert len(stored.reviews) == 1
        review = stored.reviews[0]
        assert (review.user, review.feedback, review.sentiment) == (
            "Bob",
            "Great service!",
            Sentiment.POSITIVE,
        )
        assert classifier.calls == ["Great service!"]

    async def test_reviews_keep_insertion_order_and_duplicates(self, isp_repository, isp):
        use_case = make_use_case(isp_repository, FakeSentimentClassifier(Sentiment.NEGATIVE))
        request = CreateReviewRequest(user="Ann", feedback="Drops every evening")

        await use_case.execute(str(isp.id), request)
        await use_case.execute(str(isp.id), request)
        await use_case.execute(
            str(isp.id), CreateReviewRequest(user="Cid", feedback="Fine")
        )

        stored = await isp_repository.find_by_id(isp.id)
        assert [r.user for r in stored.reviews] == ["Ann", "Ann", "Cid"]

    @pytest.mark.parametrize(
        "user, feedback",
        [(None, "Great"), ("", "Great"), ("   ", "Great"), ("Bob", None), ("Bob", "")],
    )
    async def test_missing_user_or_feedback_is_rejected(
        self, isp_repository, isp, user, feedback
    ):
        classifier = FakeSentimentClassifier()
        use_case = make_use_case(isp_repository, classifier)

        with pytest.raises(ValidationError) as excinfo:
            await use_case.execute(
                str(isp.id), CreateReviewRequest(user=user, feedback=feedback)
            )

        assert excinfo.value.message == "User and feedback are required"
        assert (await isp_repository.find_by_id(isp.id)).reviews == []
        assert classifier.calls == []

    async def test_unknown_entity_is_not_found(self, isp_repository, isp):
        use_case = make_use_case(isp_repository, FakeSentimentClassifier())

        with pytest.raises(NotFoundError) as excinfo:
            await use_case.execute(
                str(uuid4()), CreateReviewRequest(user="Bob", feedback="Great")
            )

        assert excinfo.value.message == "ISP not found"
        assert (await isp_repository.find_by_id(isp.id)).reviews == []

    async def test_malformed_id_is_not_found(self, isp_repository):
        use_case = make_use_case(isp_repository, FakeSentimentClassifier())

        with pytest.raises(NotFoundError):
            await use_case.execute(
                "not-a-uuid", CreateReviewRequest(user="Bob", feedback="Great")
            )

    async def test_sentiment_failure_falls_back_to_neutral(self, isp_repository, isp):
        use_case = make_use_case(isp_repository, FakeSentimentClassifier(fail=True))

        response = await use_case.execute(
            str(isp.id), CreateReviewRequest(user="Bob", feedback="Great service!")
        )

        assert response.sentiment == Sentiment.NEUTRAL
        stored = await isp_repository.find_by_id(isp.id)
        assert [r.sentiment for r in stored.reviews] == [Sentiment.NEUTRAL]

    async def test_write_failure_records_nothing(self, isp_repository, isp):
        use_case = make_use_case(isp_repository, FakeSentimentClassifier())
        isp_repository.fail_writes = True

        with pytest.raises(PersistenceError) as excinfo:
            await use_case.execute(
                str(isp.id), CreateReviewRequest(user="Bob", feedback="Great")
            )

        assert excinfo.value.message == "Failed to add review"
        isp_repository.fail_writes = False
        assert (await isp_repository.find_by_id(isp.id)).reviews == []

    async def test_read_failure_is_a_persistence_error(self, isp_repository, isp):
        use_case = make_use_case(isp_repository, FakeSentimentClassifier())
        isp_repository.fail_reads = True

        with pytest.raises(PersistenceError):
            await use_case.execute(
                str(isp.id), CreateReviewRequest(user="Bob", feedback="Great")
            )

    async def test_entity_deleted_before_write_is_not_found(self, isp_repository, isp):
        classifier = FakeSentimentClassifier()
        use_case = make_use_case(isp_repository, classifier)

        original_classify = classifier.classify

        async def classify_then_delete(text: str) -> Sentiment:
            isp_repository.entities.pop(isp.id)
            return await original_classify(text)

        classifier.classify = classify_then_delete  # type: ignore[method-assign]

        with pytest.raises(NotFoundError):
            await use_case.execute(
                str(isp.id), CreateReviewRequest(user="Bob", feedback="Great")
            )
