from stringer.models import InspectionResult


def pluralize(kind: str, count: int) -> str:
    return kind if count == 1 else f"{kind}s"


def describe(text: str, result: InspectionResult) -> str:
    return f'"{text}" has {result.count} {pluralize(result.kind.value, result.count)}.'


def to_dict(text: str, result: InspectionResult) -> dict:
    return {"input": text, "count": result.count, "kind": result.kind.value}
