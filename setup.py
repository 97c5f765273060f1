# This file is part of txghauth.  txghauth is free software: you can
# redistribute it and/or modify it under the terms of the GNU General Public
# License as published by the Free Software Foundation, version 2.
#
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE.  See the GNU General Public License for more
# details.
#
# You should have received a copy of the GNU General Public License along with
# this program; if not, write to the Free Software Foundation, Inc., 51
# Franklin Street, Fifth Floor, Boston, MA 02110-1301 USA.
#
# Copyright Buildbot Team Members

from setuptools import setup

setup(
    name='txghauth',
    version='0.1.0',
    description='Create GitHub OAuth2 authorization tokens using Twisted.',
    long_description=open('README.rst').read(),
    author='Tom Prince',
    author_email='tom.prince@ualberta.net',
    url='https://github.com/tomprince/txghauth',
    platforms='any',
    license='MIT',
    packages=['txghauth', 'txghauth.tests',
              'txghauth.scripts', 'txghauth.scripts.tests'],
    scripts=['bin/get-github-token'],
    install_requires=[
        'twisted[tls] >= 22.10.0',
        'pyopenssl',
        'zope.interface',
    ],
    zip_safe=False,
    classifiers=[
        'Development Status :: 4 - Beta',
        'Framework :: Twisted',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
    ],
)
