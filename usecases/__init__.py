from usecases.summary import SummaryUsecase

__all__ = ["SummaryUsecase"]
