from pingrunner.resolver import TargetResolver


def test_is_ip():
    assert TargetResolver.is_ip('8.8.8.8')
    assert TargetResolver.is_ip('::1')
    assert not TargetResolver.is_ip('example.com')


def test_resolve_ip_is_identity():
    assert TargetResolver().resolve('10.1.2.3') == '10.1.2.3'


def test_reverse_rejects_non_ip():
    resolver = TargetResolver()
    assert resolver.reverse('example.com') is None
    assert resolver.reverse('') is None
