"""
banners — display-configuration records keyed by caller-supplied id.

Provides ``BannerService`` (upsert / fetch) and the ``/banner`` routes.
"""
