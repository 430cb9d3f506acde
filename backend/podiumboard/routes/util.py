from starlette.responses import Response

from podiumboard.models.actions import ActionResult


def respond_with_action_result[DataT](
    response: Response, result: ActionResult[DataT]
) -> ActionResult[DataT]:
    response.status_code = result.status_code
    return result
