import setuptools

setuptools.setup(
	name='safechars',
	version='0.1.0',
	packages=[
		'safechars',
	],
	description='Code-point allow-lists over the Basic Multilingual Plane, for deciding which characters a text encoder may pass through unescaped',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	extras_require={
		'test': ['pytest'],
	},
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Text Processing",
		"Development Status :: 3 - Alpha",
    ],
)
