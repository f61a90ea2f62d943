import enum


class RoleCode(str, enum.Enum):
    super_admin = "strapi-super-admin"
    editor = "strapi-editor"
    author = "strapi-author"
