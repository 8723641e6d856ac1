import graphene

import gallery.schema


class Query(gallery.schema.Query, graphene.ObjectType):
    pass

class Mutation(gallery.schema.Mutation, graphene.ObjectType):
    pass

schema = graphene.Schema(query=Query, mutation=Mutation)
