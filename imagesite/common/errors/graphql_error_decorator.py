import functools
from typing import Callable

from django.core.exceptions import ValidationError
from graphql import GraphQLError


def reraise_graphql_error(func: Callable):
    """
    GraphQLのresolverがロジック実行中に例外をcatchした際に、それをGraphQLErrorに変換してreraiseする。
    ValidationErrorの場合はフィールドごとのメッセージをextensionsに含める
    """
    @functools.wraps(func)
    def resolver(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ValidationError as err:
            if hasattr(err, "error_dict"):
                fields = err.message_dict
            else:
                fields = {"__all__": err.messages}

            message = " ".join(message for messages in fields.values() for message in messages)
            raise GraphQLError(message, extensions={"code": "invalid", "fields": fields}) from err
        except Exception as err:
            raise GraphQLError(str(err)) from err

    return resolver
