"""Method descriptors for the YouTube Content ID API, version v1.

API for YouTube partners. To use this API a YouTube CMS account is required.
"""

from ytpartner.descriptors import DescriptorTable, MethodDescriptor, index_descriptors

ROOT_URL = 'https://www.googleapis.com/'
SERVICE_PATH = 'youtube/partner/v1/'
BASE_URL = f'{ROOT_URL}{SERVICE_PATH}'
UPLOAD_BASE_URL = f'{ROOT_URL}upload/{SERVICE_PATH}'

ON_BEHALF = 'onBehalfOfContentOwner'


def _method(
    name: str,
    http_method: str,
    path: str,
    *,
    required: tuple[str, ...] = (),
    path_params: tuple[str, ...] = (),
    query: tuple[str, ...] = (),
    media: bool = False,
    description: str | None = None,
) -> MethodDescriptor:
    return MethodDescriptor(
        name=name,
        url_template=f'{BASE_URL}{path}',
        http_method=http_method,
        required_params=required,
        path_params=path_params,
        media_upload_url_template=f'{UPLOAD_BASE_URL}{path}' if media else None,
        query_params=(ON_BEHALF, *query),
        description=description,
    )


DESCRIPTORS: list[MethodDescriptor] = [
    # assetLabels
    _method('assetLabels.insert', 'POST', 'assetLabels', description='Insert an asset label for an owner.'),
    _method(
        'assetLabels.list',
        'GET',
        'assetLabels',
        query=('labelPrefix', 'q'),
        description='Retrieves a list of all asset labels for an owner.',
    ),
    # assetMatchPolicy
    _method(
        'assetMatchPolicy.get',
        'GET',
        'assets/{assetId}/matchPolicy',
        required=('assetId',),
        path_params=('assetId',),
        description='Retrieves the match policy assigned to the specified asset by the content owner '
        'associated with the authenticated user.',
    ),
    _method(
        'assetMatchPolicy.patch',
        'PATCH',
        'assets/{assetId}/matchPolicy',
        required=('assetId',),
        path_params=('assetId',),
        description="Updates the asset's match policy. This method supports patch semantics.",
    ),
    _method(
        'assetMatchPolicy.update',
        'PUT',
        'assets/{assetId}/matchPolicy',
        required=('assetId',),
        path_params=('assetId',),
        description="Updates the asset's match policy.",
    ),
    # assetRelationships
    _method(
        'assetRelationships.delete',
        'DELETE',
        'assetRelationships/{assetRelationshipId}',
        required=('assetRelationshipId',),
        path_params=('assetRelationshipId',),
        description='Deletes a relationship between two assets.',
    ),
    _method(
        'assetRelationships.insert',
        'POST',
        'assetRelationships',
        description='Creates a relationship that links two assets.',
    ),
    _method(
        'assetRelationships.list',
        'GET',
        'assetRelationships',
        required=('assetId',),
        query=('assetId', 'pageToken'),
        description='Retrieves a list of relationships for a given asset.',
    ),
    # assetSearch
    _method(
        'assetSearch.list',
        'GET',
        'assetSearch',
        query=(
            'createdAfter',
            'createdBefore',
            'hasConflicts',
            'includeAnyProvidedlabel',
            'isrcs',
            'labels',
            'metadataSearchFields',
            'ownershipRestriction',
            'pageToken',
            'q',
            'sort',
            'type',
        ),
        description='Searches for assets based on asset metadata.',
    ),
    # assetShares
    _method(
        'assetShares.list',
        'GET',
        'assetShares',
        required=('assetId',),
        query=('assetId', 'pageToken'),
        description='Retrieves a list of asset shares the partner owns that map to an asset view ID, '
        'or the asset views associated with an asset share ID.',
    ),
    # assets
    _method(
        'assets.get',
        'GET',
        'assets/{assetId}',
        required=('assetId',),
        path_params=('assetId',),
        query=('fetchMatchPolicy', 'fetchMetadata', 'fetchOwnership', 'fetchOwnershipConflicts'),
        description='Retrieves the metadata for the specified asset.',
    ),
    _method('assets.insert', 'POST', 'assets', description='Inserts an asset with the specified metadata.'),
    _method(
        'assets.list',
        'GET',
        'assets',
        required=('id',),
        query=('fetchMatchPolicy', 'fetchMetadata', 'fetchOwnership', 'fetchOwnershipConflicts', 'id'),
        description='Retrieves a list of assets based on asset metadata.',
    ),
    _method(
        'assets.patch',
        'PATCH',
        'assets/{assetId}',
        required=('assetId',),
        path_params=('assetId',),
        description='Updates the metadata for the specified asset. This method supports patch semantics.',
    ),
    _method(
        'assets.update',
        'PUT',
        'assets/{assetId}',
        required=('assetId',),
        path_params=('assetId',),
        description='Updates the metadata for the specified asset.',
    ),
    # campaigns
    _method(
        'campaigns.delete',
        'DELETE',
        'campaigns/{campaignId}',
        required=('campaignId',),
        path_params=('campaignId',),
        description='Deletes a specified campaign for an owner.',
    ),
    _method(
        'campaigns.get',
        'GET',
        'campaigns/{campaignId}',
        required=('campaignId',),
        path_params=('campaignId',),
        description='Retrieves a particular campaign for an owner.',
    ),
    _method('campaigns.insert', 'POST', 'campaigns', description='Insert a new campaign for an owner.'),
    _method(
        'campaigns.list',
        'GET',
        'campaigns',
        query=('pageToken',),
        description='Retrieves a list of campaigns for an owner.',
    ),
    _method(
        'campaigns.patch',
        'PATCH',
        'campaigns/{campaignId}',
        required=('campaignId',),
        path_params=('campaignId',),
        description='Update the data for a specific campaign. This method supports patch semantics.',
    ),
    _method(
        'campaigns.update',
        'PUT',
        'campaigns/{campaignId}',
        required=('campaignId',),
        path_params=('campaignId',),
        description='Update the data for a specific campaign.',
    ),
    # claimHistory
    _method(
        'claimHistory.get',
        'GET',
        'claimHistory/{claimId}',
        required=('claimId',),
        path_params=('claimId',),
        description='Retrieves the claim history for a specified claim.',
    ),
    # claimSearch
    _method(
        'claimSearch.list',
        'GET',
        'claimSearch',
        query=(
            'assetId',
            'contentType',
            'createdAfter',
            'createdBefore',
            'inactiveReasons',
            'includeThirdPartyClaims',
            'origin',
            'pageToken',
            'partnerUploaded',
            'q',
            'referenceId',
            'sort',
            'status',
            'statusModifiedAfter',
            'statusModifiedBefore',
            'videoId',
        ),
        description='Retrieves a list of claims that match the search criteria.',
    ),
    # claims
    _method(
        'claims.get',
        'GET',
        'claims/{claimId}',
        required=('claimId',),
        path_params=('claimId',),
        description='Retrieves a specific claim by ID.',
    ),
    _method('claims.insert', 'POST', 'claims', query=('isManualClaim',), description='Creates a claim.'),
    _method(
        'claims.list',
        'GET',
        'claims',
        query=('assetId', 'id', 'pageToken', 'q', 'videoId'),
        description='Retrieves a list of claims administered by the content owner associated with '
        'the currently authenticated user.',
    ),
    _method(
        'claims.patch',
        'PATCH',
        'claims/{claimId}',
        required=('claimId',),
        path_params=('claimId',),
        description='Updates an existing claim by either changing its policy or its status. '
        'This method supports patch semantics.',
    ),
    _method(
        'claims.update',
        'PUT',
        'claims/{claimId}',
        required=('claimId',),
        path_params=('claimId',),
        description='Updates an existing claim by either changing its policy or its status.',
    ),
    # contentOwnerAdvertisingOptions
    _method(
        'contentOwnerAdvertisingOptions.get',
        'GET',
        'contentOwnerAdvertisingOptions',
        description='Retrieves advertising options for the content owner associated with the authenticated user.',
    ),
    _method(
        'contentOwnerAdvertisingOptions.patch',
        'PATCH',
        'contentOwnerAdvertisingOptions',
        description='Updates advertising options for the content owner associated with the authenticated '
        'API user. This method supports patch semantics.',
    ),
    _method(
        'contentOwnerAdvertisingOptions.update',
        'PUT',
        'contentOwnerAdvertisingOptions',
        description='Updates advertising options for the content owner associated with the authenticated API user.',
    ),
    # contentOwners
    _method(
        'contentOwners.get',
        'GET',
        'contentOwners/{contentOwnerId}',
        required=('contentOwnerId',),
        path_params=('contentOwnerId',),
        description='Retrieves information about the specified content owner.',
    ),
    _method(
        'contentOwners.list',
        'GET',
        'contentOwners',
        query=('fetchMine', 'id'),
        description='Retrieves a list of content owners that match the request criteria.',
    ),
    # liveCuepoints
    _method(
        'liveCuepoints.insert',
        'POST',
        'liveCuepoints',
        required=('channelId',),
        query=('channelId',),
        description='Inserts a cuepoint into a live broadcast.',
    ),
    # metadataHistory
    _method(
        'metadataHistory.list',
        'GET',
        'metadataHistory',
        required=('assetId',),
        query=('assetId',),
        description='Retrieves a list of all metadata provided for an asset, regardless of which '
        'content owner provided the data.',
    ),
    # orders
    _method(
        'orders.delete',
        'DELETE',
        'orders/{orderId}',
        required=('orderId',),
        path_params=('orderId',),
        description='Delete an order, which moves orders to inactive state and removes any associated video.',
    ),
    _method(
        'orders.get',
        'GET',
        'orders/{orderId}',
        required=('orderId',),
        path_params=('orderId',),
        description='Retrieve the details of an existing order.',
    ),
    _method(
        'orders.insert',
        'POST',
        'orders',
        description='Creates a new basic order entry in the YouTube premium asset order management system.',
    ),
    _method(
        'orders.list',
        'GET',
        'orders',
        query=(
            'channelId',
            'contentType',
            'country',
            'customId',
            'pageToken',
            'priority',
            'productionHouse',
            'q',
            'status',
            'videoId',
        ),
        description='Return a list of orders, filtered by the parameters below.',
    ),
    _method(
        'orders.patch',
        'PATCH',
        'orders/{orderId}',
        required=('orderId',),
        path_params=('orderId',),
        description='Update the values in an existing order. This method supports patch semantics.',
    ),
    _method(
        'orders.update',
        'PUT',
        'orders/{orderId}',
        required=('orderId',),
        path_params=('orderId',),
        description='Update the values in an existing order.',
    ),
    # ownership
    _method(
        'ownership.get',
        'GET',
        'assets/{assetId}/ownership',
        required=('assetId',),
        path_params=('assetId',),
        description='Retrieves the ownership data provided for the specified asset by the content owner '
        'associated with the authenticated user.',
    ),
    _method(
        'ownership.patch',
        'PATCH',
        'assets/{assetId}/ownership',
        required=('assetId',),
        path_params=('assetId',),
        description='Provides new ownership information for the specified asset. '
        'This method supports patch semantics.',
    ),
    _method(
        'ownership.update',
        'PUT',
        'assets/{assetId}/ownership',
        required=('assetId',),
        path_params=('assetId',),
        description='Provides new ownership information for the specified asset.',
    ),
    # ownershipHistory
    _method(
        'ownershipHistory.list',
        'GET',
        'ownershipHistory',
        required=('assetId',),
        query=('assetId',),
        description='Retrieves a list of the ownership data for an asset, regardless of which content '
        'owner provided the data.',
    ),
    # policies
    _method(
        'policies.get',
        'GET',
        'policies/{policyId}',
        required=('policyId',),
        path_params=('policyId',),
        description='Retrieves the specified saved policy.',
    ),
    _method('policies.insert', 'POST', 'policies', description='Creates a saved policy.'),
    _method(
        'policies.list',
        'GET',
        'policies',
        query=('id', 'sort'),
        description="Retrieves a list of the content owner's saved policies.",
    ),
    _method(
        'policies.patch',
        'PATCH',
        'policies/{policyId}',
        required=('policyId',),
        path_params=('policyId',),
        description='Updates the specified saved policy. This method supports patch semantics.',
    ),
    _method(
        'policies.update',
        'PUT',
        'policies/{policyId}',
        required=('policyId',),
        path_params=('policyId',),
        description='Updates the specified saved policy.',
    ),
    # publishers
    _method(
        'publishers.get',
        'GET',
        'publishers/{publisherId}',
        required=('publisherId',),
        path_params=('publisherId',),
        description='Retrieves information about the specified publisher.',
    ),
    _method(
        'publishers.list',
        'GET',
        'publishers',
        query=('caeNumber', 'id', 'ipiNumber', 'maxResults', 'namePrefix', 'pageToken'),
        description='Retrieves a list of publishers that match the request criteria.',
    ),
    # referenceConflicts
    _method(
        'referenceConflicts.get',
        'GET',
        'referenceConflicts/{referenceConflictId}',
        required=('referenceConflictId',),
        path_params=('referenceConflictId',),
        description='Retrieves information about the specified reference conflict.',
    ),
    _method(
        'referenceConflicts.list',
        'GET',
        'referenceConflicts',
        query=('pageToken',),
        description='Retrieves a list of unresolved reference conflicts.',
    ),
    # references
    _method(
        'references.get',
        'GET',
        'references/{referenceId}',
        required=('referenceId',),
        path_params=('referenceId',),
        description='Retrieves information about the specified reference.',
    ),
    _method(
        'references.insert',
        'POST',
        'references',
        query=('claimId',),
        media=True,
        description='Creates a reference, either from uploaded reference content or from a claimed video.',
    ),
    _method(
        'references.list',
        'GET',
        'references',
        query=('assetId', 'id', 'pageToken'),
        description='Retrieves a list of references by ID or the list of references for the specified asset.',
    ),
    _method(
        'references.patch',
        'PATCH',
        'references/{referenceId}',
        required=('referenceId',),
        path_params=('referenceId',),
        query=('releaseClaims',),
        description='Updates a reference. This method supports patch semantics.',
    ),
    _method(
        'references.update',
        'PUT',
        'references/{referenceId}',
        required=('referenceId',),
        path_params=('referenceId',),
        query=('releaseClaims',),
        description='Updates a reference.',
    ),
    # validator
    _method('validator.validate', 'POST', 'validator', description='Validate a metadata file.'),
    # videoAdvertisingOptions
    _method(
        'videoAdvertisingOptions.get',
        'GET',
        'videoAdvertisingOptions/{videoId}',
        required=('videoId',),
        path_params=('videoId',),
        description='Retrieves advertising settings for the specified video.',
    ),
    _method(
        'videoAdvertisingOptions.getEnabledAds',
        'GET',
        'videoAdvertisingOptions/{videoId}/getEnabledAds',
        required=('videoId',),
        path_params=('videoId',),
        description='Retrieves details about the types of allowed ads for a specified partner- or '
        'user-uploaded video.',
    ),
    _method(
        'videoAdvertisingOptions.patch',
        'PATCH',
        'videoAdvertisingOptions/{videoId}',
        required=('videoId',),
        path_params=('videoId',),
        description='Updates the advertising settings for the specified video. '
        'This method supports patch semantics.',
    ),
    _method(
        'videoAdvertisingOptions.update',
        'PUT',
        'videoAdvertisingOptions/{videoId}',
        required=('videoId',),
        path_params=('videoId',),
        description='Updates the advertising settings for the specified video.',
    ),
    # whitelists
    _method(
        'whitelists.delete',
        'DELETE',
        'whitelists/{id}',
        required=('id',),
        path_params=('id',),
        description='Removes a whitelisted channel for a content owner.',
    ),
    _method(
        'whitelists.get',
        'GET',
        'whitelists/{id}',
        required=('id',),
        path_params=('id',),
        description='Retrieves a specific whitelisted channel by ID.',
    ),
    _method('whitelists.insert', 'POST', 'whitelists', description='Whitelist a YouTube channel for your content owner.'),
    _method(
        'whitelists.list',
        'GET',
        'whitelists',
        query=('id', 'pageToken'),
        description='Retrieves a list of whitelisted channels for a content owner.',
    ),
]

TABLE: DescriptorTable = index_descriptors(DESCRIPTORS)
