"""
Target resolution via dnspython, used for display only
"""

import ipaddress
from typing import Optional

import dns.exception
import dns.resolver
import dns.reversename


class TargetResolver:
    """
    Forward and reverse lookups for the probe target.
    
    ping resolves names itself; these lookups only feed the header shown
    before probing, so every failure is reported as None.
    """
    
    def __init__(self, timeout: float = 2.0):
        self.timeout = timeout
        try:
            self._resolver = dns.resolver.Resolver()
        except dns.resolver.NoResolverConfiguration:
            # no /etc/resolv.conf; lookups will fail with NoNameservers
            self._resolver = dns.resolver.Resolver(configure=False)
        self._resolver.timeout = timeout
        self._resolver.lifetime = timeout
    
    @staticmethod
    def is_ip(target: str) -> bool:
        try:
            ipaddress.ip_address(target)
            return True
        except ValueError:
            return False
    
    def resolve(self, target: str) -> Optional[str]:
        """Return the first A (then AAAA) address of target, or target if it is an IP"""
        if self.is_ip(target):
            return target
        
        for rdtype in ('A', 'AAAA'):
            try:
                answers = self._resolver.resolve(target, rdtype)
                for rdata in answers:
                    return rdata.to_text()
            except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer,
                    dns.resolver.NoNameservers, dns.exception.Timeout):
                continue
            except dns.exception.DNSException:
                return None
        return None
    
    def reverse(self, ip: str) -> Optional[str]:
        """PTR name for ip without the trailing dot"""
        if not ip or not self.is_ip(ip):
            return None
        
        try:
            name = dns.reversename.from_address(ip)
            answers = self._resolver.resolve(name, 'PTR')
            for rdata in answers:
                return rdata.to_text().rstrip('.')
        except dns.exception.DNSException:
            return None
        return None
