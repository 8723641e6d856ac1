import graphene
from graphene_django import DjangoObjectType
from graphene_file_upload.scalars import Upload

from .models import Album, Profile
from .logic import gallery_interactor as logic
from common.errors.graphql_error_decorator import reraise_graphql_error


class ProfileNode(DjangoObjectType):
    class Meta:
        model = Profile
        fields = ("id", "display_name", "self_introduction", "icon", "cover_image")

    def resolve_icon(self: Profile, info):
        return self.icon.url if self.icon else ""

    def resolve_cover_image(self: Profile, info):
        return self.cover_image.url if self.cover_image else ""


class AlbumNode(DjangoObjectType):
    class Meta:
        model = Album
        fields = ("id", "title", "create_date", "cover")

    images = graphene.List(graphene.String)

    def resolve_cover(self: Album, info):
        return self.cover.url if self.cover else ""

    def resolve_images(self: Album, info):
        return [image.url for image in self.images]


class Query(graphene.ObjectType):
    profile = graphene.Field(ProfileNode, id=graphene.ID(required=True))
    all_profiles = graphene.List(ProfileNode)
    album = graphene.Field(AlbumNode, id=graphene.ID(required=True))
    all_albums = graphene.List(AlbumNode)

    def resolve_profile(root, info, id):
        try:
            return Profile.objects.get(pk=id)
        except Profile.DoesNotExist:
            return None

    def resolve_all_profiles(root, info):
        return Profile.objects.all()

    def resolve_album(root, info, id):
        try:
            return Album.objects.get(pk=id)
        except Album.DoesNotExist:
            return None

    def resolve_all_albums(root, info):
        return Album.objects.all()


class EditProfile(graphene.Mutation):
    class Arguments:
        id = graphene.ID(required=False)
        display_name = graphene.String(required=False)
        self_introduction = graphene.String(required=False)
        icon = Upload(required=False)
        cover_image = Upload(required=False)

    ok = graphene.Boolean()
    profile = graphene.Field(ProfileNode)

    @classmethod
    @reraise_graphql_error
    def mutate(cls, root, info, id=None, **kwargs):
        profile = logic.edit_profile(id, **kwargs)
        return EditProfile(ok=True, profile=profile)


class CreateAlbum(graphene.Mutation):
    class Arguments:
        title = graphene.String(required=True)
        cover = Upload(required=False)
        images = graphene.List(Upload, required=False)

    ok = graphene.Boolean()
    album = graphene.Field(AlbumNode)

    @classmethod
    @reraise_graphql_error
    def mutate(cls, root, info, title, cover=None, images=None):
        album = logic.create_album(title, cover=cover, images=images)
        return CreateAlbum(ok=True, album=album)


class AddAlbumImages(graphene.Mutation):
    class Arguments:
        album_id = graphene.ID(required=True)
        images = graphene.List(Upload, required=True)

    ok = graphene.Boolean()
    album = graphene.Field(AlbumNode)

    @classmethod
    @reraise_graphql_error
    def mutate(cls, root, info, album_id, images):
        album = logic.add_album_images(album_id, images)
        return AddAlbumImages(ok=True, album=album)


class Mutation(graphene.ObjectType):
    edit_profile = EditProfile.Field()
    create_album = CreateAlbum.Field()
    add_album_images = AddAlbumImages.Field()
